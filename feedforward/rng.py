"""Source of randomness for parameter initialization."""

from typing import Optional

import numpy as np


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Return a numpy Generator, seeded when ``seed`` is given"""
    return np.random.default_rng(seed)


def resolve_rng(rng: Optional[np.random.Generator] = None, seed: Optional[int] = None) -> np.random.Generator:
    """Pick the generator to draw parameters from.

    An explicit generator wins; otherwise one is built from ``seed``
    (unseeded when ``seed`` is None). Supplying both is ambiguous.
    """
    if rng is not None and seed is not None:
        raise ValueError("Pass either rng or seed, not both")
    if rng is not None:
        return rng
    return make_rng(seed)


def standard_normal(rng: np.random.Generator) -> float:
    """Draw one sample from N(0, 1) as a plain float"""
    return float(rng.standard_normal())
