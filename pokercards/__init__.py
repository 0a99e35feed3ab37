"""
PokerCards: playing card primitives for poker software.

This package models a single card's rank and suit, parses the standard
short notation ("AS", "TD", "10C") and offers two comparison relations on
ranks: a partial order in which the Ace is unordered, and a total order in
which the Ace is high.
"""

import logging

__version__ = "0.1.0"

logging.getLogger("pokercards").addHandler(logging.NullHandler())

from pokercards.core.card import Card, Suit, Rank, Ordering
from pokercards.core.errors import (
    CardParseError, InvalidSuit, EmptyRank, OverlongRank, InvalidRank, InvalidCardLength
)
from pokercards.utils.logging import setup_logging
from pokercards.config.config_manager import get_config

__all__ = [
    "Card", "Suit", "Rank", "Ordering",
    "CardParseError", "InvalidSuit", "EmptyRank", "OverlongRank", "InvalidRank",
    "InvalidCardLength", "setup_logging", "get_config",
]
