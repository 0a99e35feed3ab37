"""
Exceptions raised while parsing card notation.

Every parser in :mod:`pokercards.core.card` raises one of these classes
directly. They all derive from :class:`CardParseError`, itself a
``ValueError``, so callers can catch the whole family at once or pick out
the stage that failed.
"""


class CardParseError(ValueError):
    """
    Base class for card notation errors.

    Attributes:
        text (str): The input that could not be parsed.
    """

    def __init__(self, message: str, text: str = ""):
        super().__init__(message)
        self.text = text


class InvalidSuit(CardParseError):
    """Suit code is not one of C, H, D or S."""

    def __init__(self, text: str):
        super().__init__(f"invalid suit: {text}", text)


class EmptyRank(CardParseError):
    """Rank code was the empty string."""

    def __init__(self):
        super().__init__("empty rank", "")


class OverlongRank(CardParseError):
    """Rank code has two or more characters and is not "10"."""

    def __init__(self, text: str):
        super().__init__(f"overlong rank: {text}", text)


class InvalidRank(CardParseError):
    """Single-character rank code that names no rank."""

    def __init__(self, text: str):
        super().__init__(f"invalid rank: {text}", text)


class InvalidCardLength(CardParseError):
    """Card code is not two or three characters long."""

    def __init__(self, text: str):
        super().__init__(f"invalid card description length: {text}", text)
