"""
Implementation of playing cards for poker software.

Ranks carry two comparison relations. ``partial_cmp`` treats an Ace as
unordered against every other rank, since it may play high or low
depending on the game. ``cmp`` is a total order with the Ace high, which
is what sorting needs. Neither relation is bound to the ``<``/``>``
operators, so callers always say which one they mean.
"""

import logging
from enum import Enum, IntEnum
from typing import Optional

from pokercards.core.errors import (
    CardParseError,
    EmptyRank,
    InvalidCardLength,
    InvalidRank,
    InvalidSuit,
    OverlongRank,
)

logger = logging.getLogger(__name__)


class Ordering(IntEnum):
    """Result of comparing two ranks or cards."""
    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def between(cls, a: int, b: int) -> "Ordering":
        """Order two integers."""
        return cls((a > b) - (a < b))


def _rejected(error: CardParseError) -> CardParseError:
    logger.debug(f"Rejected card notation {error.text!r}: {error}")
    return error


def _require_str(text, what: str) -> None:
    if not isinstance(text, str):
        raise TypeError(f"{what} must be parsed from str, not {type(text).__name__}")


class Suit(Enum):
    """Enumeration of card suits."""
    CLUBS = "C"
    HEARTS = "H"
    DIAMONDS = "D"
    SPADES = "S"

    @property
    def code(self) -> str:
        """Return the one-letter code this suit is parsed from."""
        return self.value

    @classmethod
    def default(cls) -> "Suit":
        """Placeholder suit used before a real one is known."""
        return cls.SPADES

    @classmethod
    def parse(cls, text: str) -> "Suit":
        """
        Parse a suit code.

        Args:
            text (str): Exactly one of "C", "H", "D" or "S".

        Returns:
            Suit: The matching suit.

        Raises:
            InvalidSuit: If the text is anything else, including lowercase
                codes and surrounding whitespace.
        """
        _require_str(text, "Suit")
        suit = _SUITS_BY_CODE.get(text)
        if suit is None:
            raise _rejected(InvalidSuit(text))
        return suit


_SUITS_BY_CODE = {suit.value: suit for suit in Suit}


class Rank(Enum):
    """
    Enumeration of card ranks.

    Member values are the numeric strength of the rank, from 2 for a deuce
    up to 14 for the Ace.
    """
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __int__(self) -> int:
        return self.value

    @property
    def strength(self) -> int:
        """Numeric strength of the rank, Ace high (2-14)."""
        return self.value

    @property
    def is_spot(self) -> bool:
        """Whether this is a numbered card from 2 to 9."""
        return self.value <= 9

    def sort_key(self) -> int:
        """Key for sorting ranks in the total (Ace high) order."""
        return self.value

    @classmethod
    def default(cls) -> "Rank":
        """Placeholder rank used before a real one is known."""
        return cls.ACE

    @classmethod
    def spot(cls, n: int) -> "Rank":
        """
        Get the rank of a spot card.

        Args:
            n (int): Pip count, 2 to 9. A ten is ``Rank.TEN``, not a spot.

        Returns:
            Rank: The matching rank.

        Raises:
            InvalidRank: If ``n`` is not an integer in 2..9.
        """
        if isinstance(n, bool) or not isinstance(n, int) or not 2 <= n <= 9:
            raise InvalidRank(str(n))
        return cls(n)

    @classmethod
    def parse(cls, text: str) -> "Rank":
        """
        Parse a rank code.

        Accepts "A", "K", "Q", "J", "T", "10" or a single digit 2-9. The
        length check runs before the content check, so a two-character
        string that is not "10" is an overlong rank even if it is garbage.

        Args:
            text (str): The rank code.

        Returns:
            Rank: The matching rank.

        Raises:
            EmptyRank: If the text is empty.
            OverlongRank: If the text has two or more characters and is not "10".
            InvalidRank: If the single character names no rank.
        """
        _require_str(text, "Rank")
        named = _FACE_RANKS.get(text)
        if named is not None:
            return named
        if not text:
            raise _rejected(EmptyRank())
        if text == "10":
            return cls.TEN
        if len(text) >= 2:
            raise _rejected(OverlongRank(text))
        if text in _SPOT_DIGITS:
            return cls.spot(int(text))
        raise _rejected(InvalidRank(text))

    def _check_comparable(self, other) -> None:
        if not isinstance(other, Rank):
            raise TypeError(f"cannot compare Rank with {type(other).__name__}")

    def partial_cmp(self, other: "Rank") -> Optional[Ordering]:
        """
        Compare two ranks, leaving the Ace unordered.

        Returns:
            Optional[Ordering]: ``None`` when exactly one side is an Ace,
            ``Ordering.EQUAL`` for two Aces, otherwise the order of the
            numeric strengths.
        """
        self._check_comparable(other)
        if self is Rank.ACE and other is Rank.ACE:
            return Ordering.EQUAL
        if self is Rank.ACE or other is Rank.ACE:
            return None
        return Ordering.between(self.value, other.value)

    def cmp(self, other: "Rank") -> Ordering:
        """Compare two ranks in the total order, Ace high."""
        self._check_comparable(other)
        return Ordering.between(self.value, other.value)


_FACE_RANKS = {
    "A": Rank.ACE,
    "K": Rank.KING,
    "Q": Rank.QUEEN,
    "J": Rank.JACK,
    "T": Rank.TEN,
}

_SPOT_DIGITS = frozenset("23456789")


class Card:
    """
    A playing card with a rank and suit.

    Cards are immutable. Equality and hashing use both fields, while both
    comparators look at the rank only: suits never break ties in poker.

    Attributes:
        rank (Rank): The rank of the card.
        suit (Suit): The suit of the card.
    """

    __slots__ = ("_rank", "_suit")

    def __init__(self, rank: Rank = Rank.ACE, suit: Suit = Suit.SPADES):
        """
        Initialize a card with a rank and suit.

        Args:
            rank (Rank, optional): The rank of the card. Defaults to Rank.ACE.
            suit (Suit, optional): The suit of the card. Defaults to Suit.SPADES.
        """
        if not isinstance(rank, Rank):
            raise TypeError(f"rank must be a Rank, not {type(rank).__name__}")
        if not isinstance(suit, Suit):
            raise TypeError(f"suit must be a Suit, not {type(suit).__name__}")
        self._rank = rank
        self._suit = suit

    @property
    def rank(self) -> Rank:
        return self._rank

    @property
    def suit(self) -> Suit:
        return self._suit

    @classmethod
    def default(cls) -> "Card":
        """Placeholder card, the Ace of Spades."""
        return cls(Rank.default(), Suit.default())

    @classmethod
    def parse(cls, text: str) -> "Card":
        """
        Parse a card code such as "AS", "9H" or "10D".

        The last character is the suit and everything before it the rank.
        Rank and suit errors are raised unchanged.

        Args:
            text (str): The card code, two or three characters long.

        Returns:
            Card: The parsed card.

        Raises:
            InvalidCardLength: If the text is not two or three characters long.
            EmptyRank, OverlongRank, InvalidRank: From parsing the rank.
            InvalidSuit: From parsing the suit.
        """
        _require_str(text, "Card")
        if not 2 <= len(text) <= 3:
            raise _rejected(InvalidCardLength(text))
        rank = Rank.parse(text[:-1])
        suit = Suit.parse(text[-1])
        return cls(rank, suit)

    def sort_key(self) -> int:
        """Key for sorting cards by rank in the total (Ace high) order."""
        return self._rank.sort_key()

    def _check_comparable(self, other) -> None:
        if not isinstance(other, Card):
            raise TypeError(f"cannot compare Card with {type(other).__name__}")

    def partial_cmp(self, other: "Card") -> Optional[Ordering]:
        """Compare the ranks of two cards, leaving the Ace unordered."""
        self._check_comparable(other)
        return self._rank.partial_cmp(other._rank)

    def cmp(self, other: "Card") -> Ordering:
        """Compare the ranks of two cards in the total order, Ace high."""
        self._check_comparable(other)
        return self._rank.cmp(other._rank)

    def __eq__(self, other) -> bool:
        """Check if two cards have the same rank and suit."""
        if not isinstance(other, Card):
            return NotImplemented
        return self._rank == other._rank and self._suit == other._suit

    def __hash__(self) -> int:
        return hash((self._rank, self._suit))

    def __repr__(self) -> str:
        return f"Card(rank={self._rank}, suit={self._suit})"
