"""Deterministic seeding utilities for reproducibility.

Randomness is never drawn from global state. A run resolves one seed, logs
it, and builds an explicit numpy Generator from it; the process-wide
`random` and `np.random` states are left untouched.
"""

from typing import Optional

import numpy as np


def resolve_seed(seed: Optional[int] = None) -> int:
    """Return the seed to use for a run.

    Args:
        seed: The seed value to use. If None, a fresh seed is drawn from OS
              entropy and returned for later reproducibility.

    Returns:
        The seed value to use (useful when seed=None was passed).

    Example:
        >>> from poker_hands import resolve_seed
        >>> resolve_seed(42)  # Deterministic
        42
        >>> seed = resolve_seed()  # Random seed, but returns it for logging
        >>> print(f"Using seed: {seed}")
    """
    if seed is None:
        seed = int(np.random.SeedSequence().entropy % 2**32)
    return seed


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create a numpy Generator, seeded when a seed is given."""
    return np.random.default_rng(seed)
