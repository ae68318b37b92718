"""
Toy data generation helpers for examples.
"""
from typing import Any, List, Optional, Sequence, Tuple
import numpy as np

def build_mixture_sample(
    n: int,
    centers: Sequence[float] = (0.0, 6.0),
    spread: float = 1.0,
    rng: Optional[np.random.Generator] = None
) -> np.ndarray:
    """
    Draw ``n`` values from an equal-weight Gaussian mixture.

    Args:
        n: Number of samples.
        centers: Component means.
        spread: Shared standard deviation.
        rng: Random number generator.
    """
    if rng is None:
        rng = np.random.default_rng()
    which = rng.integers(0, len(centers), size=n)
    return rng.normal(np.asarray(centers, dtype=float)[which], spread)

def build_grouped_sample(
    n: int,
    groups: List[Any],
    rng: Optional[np.random.Generator] = None
) -> Tuple[List[Any], np.ndarray]:
    """
    Generate ``(labels, values)`` where each group has its own location.

    Group ``i`` is centered at ``2 * i`` with a heavy right tail so that
    boxplot outliers show up.
    """
    if rng is None:
        rng = np.random.default_rng()
    index = rng.integers(0, len(groups), size=n)
    values = 2.0 * index + rng.standard_t(df=3, size=n)
    return [groups[i] for i in index], values

def build_correlated_pairs(
    n: int,
    correlation: float = 0.7,
    rng: Optional[np.random.Generator] = None
) -> Tuple[np.ndarray, np.ndarray]:
    """Paired standard normal samples with the given correlation."""
    if rng is None:
        rng = np.random.default_rng()
    cov = [[1.0, correlation], [correlation, 1.0]]
    pairs = rng.multivariate_normal([0.0, 0.0], cov, size=n)
    return pairs[:, 0], pairs[:, 1]
