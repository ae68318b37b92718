"""
Random Number Generator (RNG) factory for sample data.
"""
from typing import Optional
import numpy as np

def make_rng(seed: Optional[int]) -> np.random.Generator:
    """Create a fresh numpy Generator; ``None`` gives a nondeterministic one."""
    return np.random.default_rng(seed)
