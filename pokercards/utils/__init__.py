"""
Utils module for pokercards.

This module includes helpers shared across the package, such as logging setup.
"""

from pokercards.utils.logging import setup_logging

__all__ = ["setup_logging"]
