"""Poker Hands - five-card poker hand classification and comparison.

Classifies five-card hands into the nine standard categories and decides
which of two hands wins, including the low-ace straight (5-4-3-2-A).
"""

__version__ = "0.1.0"
__author__ = "Poker Hands Team"

from poker_hands.utils.seeding import resolve_seed

__all__ = ["__version__", "resolve_seed"]
