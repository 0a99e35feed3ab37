"""
Initialization file for the pokercards.core package.
"""

from .card import Card, Suit, Rank, Ordering
from .errors import (
    CardParseError,
    InvalidSuit,
    EmptyRank,
    OverlongRank,
    InvalidRank,
    InvalidCardLength,
)

__all__ = [
    'Card', 'Suit', 'Rank', 'Ordering',
    'CardParseError', 'InvalidSuit', 'EmptyRank', 'OverlongRank',
    'InvalidRank', 'InvalidCardLength',
]
