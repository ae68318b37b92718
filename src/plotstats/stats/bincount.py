"""
Automatic bin-count selection for regular histograms.

The number of equal-width bins is chosen by the penalized maximum likelihood
criterion of Birgé and Rozenholc ("How many bins should be put in a regular
histogram?", ESAIM: P&S 10, 2006). For ``d`` bins over ``n`` values with
per-bin counts ``N_k`` the criterion is

    L(d) = sum_k N_k * log(d * N_k / n) - (d - 1 + log(d) ** 2.5)

where empty bins contribute nothing. The first term is the log-likelihood of
the histogram density (it grows with resolution), the second penalizes
model size (it grows with the number of bins). The selected count maximizes
``L``; among equal scores the smaller count wins.

The 2D selector searches ``(dx, dy)`` jointly with ``d = dx * dy`` cells.

Responsibilities
  - choose_bin_count_1d / choose_bin_count_2d: select counts and return bin occupancies.
  - bin_counts_1d / bin_counts_2d: count occupancies for a fixed number of bins.
  - bin_edges: equal-width edges shared by the binning statistics.

Limitations
  - Equal-width bins only.
  - Candidate counts are capped by ``RuntimeConfig.max_bin_count`` (1D) and
    ``max_bin_count_2d`` (per axis).
"""
# 说明：直方图分箱数自动选择（BinCountSelector），纯数值例程，不依赖其他组件。
# 职责：
# - prepare_sample / prepare_paired_sample：样本校验（空样本 / 非有限值 / 长度不一致），严格模式下直接报错，否则剔除并告警
# - bin_counts_1d / bin_counts_2d：给定分箱数，按左闭区间统计各箱计数（最大值落入最后一箱）
# - _penalized_likelihood：Birgé-Rozenholc 惩罚似然评分
# - choose_bin_count_1d / choose_bin_count_2d：在候选范围内搜索最优分箱数
# - bin_edges：等宽分箱边界，最后一个边界固定为 hi，保证精确覆盖 [lo, hi]
# 约定：
# - 候选上界 d_max = min(配置上限, ceil(n / log n))；n <= 1 或值域为 0 时退化为单箱，不做除零

from __future__ import annotations

import math
from typing import Any, Iterable, Tuple

import numpy as np

from plotstats.core.exceptions import InvalidSampleError
from plotstats.core.utils.config import get_config
from plotstats.core.utils.logging import get_logger
from plotstats.core.utils.math_utils import as_float_array, finite_mask

logger = get_logger(__name__)


def prepare_sample(values: Iterable[Any], *, label: str = "sample") -> np.ndarray:
    # 转为 float64 数组并处理非有限值；任何无法转换为数值的元素同样视为不可用样本
    try:
        arr = as_float_array(values)
    except (TypeError, ValueError) as exc:
        raise InvalidSampleError(f"{label} must contain real numbers") from exc
    if arr.size == 0:
        raise InvalidSampleError(f"cannot choose a bin count for an empty {label}")
    mask = finite_mask(arr)
    if not mask.all():
        if get_config().strict_validation:
            raise InvalidSampleError(f"{label} contains non-finite values")
        logger.warning("dropping %d non-finite values from %s", int((~mask).sum()), label)
        arr = arr[mask]
        if arr.size == 0:
            raise InvalidSampleError(f"{label} has no finite values")
    return arr


def _candidate_limit(n: int, ceiling: int) -> int:
    # 候选分箱数上界：ceil(n / log n)，并受配置上限约束
    if n <= 1:
        return 1
    return max(1, min(int(ceiling), int(math.ceil(n / math.log(n)))))


def _bin_index(values: np.ndarray, lo: float, hi: float, d: int) -> np.ndarray:
    # 左闭区间分箱：k = floor((v - lo) / w)，并把 v == hi 截断到最后一箱
    width = (hi - lo) / d
    # 值域极窄时宽度可能下溢为 0，与常量样本同样处理
    if d == 1 or width <= 0:
        return np.zeros(values.shape, dtype=np.intp)
    index = np.floor((values - lo) / width).astype(np.intp)
    return np.clip(index, 0, d - 1)


def bin_counts_1d(values: np.ndarray, lo: float, hi: float, d: int) -> np.ndarray:
    """Occupancy of ``d`` equal-width bins over ``[lo, hi]``."""
    return np.bincount(_bin_index(values, lo, hi, d), minlength=d)


def bin_counts_2d(
    xs: np.ndarray,
    ys: np.ndarray,
    bounds: Tuple[float, float, float, float],
    dx: int,
    dy: int,
) -> np.ndarray:
    """Occupancy grid of shape ``(dx, dy)``; ``counts[i, j]`` is x-bin ``i`` and y-bin ``j``."""
    x_lo, x_hi, y_lo, y_hi = bounds
    ix = _bin_index(xs, x_lo, x_hi, dx)
    iy = _bin_index(ys, y_lo, y_hi, dy)
    flat = np.bincount(ix * dy + iy, minlength=dx * dy)
    return flat.reshape(dx, dy)


def _penalized_likelihood(counts: np.ndarray, n: int, d: int) -> float:
    occupied = counts[counts > 0].astype(np.float64)
    loglik = float(np.sum(occupied * np.log(d * occupied / n)))
    penalty = d - 1 + math.log(d) ** 2.5
    return loglik - penalty


def bin_edges(lo: float, hi: float, d: int) -> Tuple[np.ndarray, np.ndarray]:
    """Left and right edges of ``d`` equal-width bins covering ``[lo, hi]``."""
    width = (hi - lo) / d
    edges = lo + np.arange(d + 1, dtype=np.float64) * width
    edges[-1] = hi
    return edges[:-1].copy(), edges[1:].copy()


def choose_bin_count_1d(values: Iterable[Any]) -> Tuple[int, np.ndarray]:
    """
    Choose a bin count for a one dimensional sample.

    Returns:
        ``(d, counts)`` where ``counts`` is an int array of length ``d``.

    Raises:
        InvalidSampleError: empty or unusable sample.
    """
    xs = prepare_sample(values, label="x sample")
    n = int(xs.size)
    lo, hi = float(xs.min()), float(xs.max())
    if n == 1 or hi == lo:
        return 1, np.array([n], dtype=np.int64)

    d_max = _candidate_limit(n, get_config().max_bin_count)
    best_d, best_counts, best_score = 1, np.array([n], dtype=np.int64), -math.inf
    for d in range(1, d_max + 1):
        counts = bin_counts_1d(xs, lo, hi, d)
        score = _penalized_likelihood(counts, n, d)
        # 严格大于：评分相同时保留较小的分箱数
        if score > best_score:
            best_d, best_counts, best_score = d, counts, score

    logger.debug("selected %d bins out of %d candidates for n=%d", best_d, d_max, n, extra={"counts": best_counts})
    return best_d, best_counts.astype(np.int64)


def prepare_paired_sample(xs_values: Iterable[Any], ys_values: Iterable[Any]) -> Tuple[np.ndarray, np.ndarray]:
    """Validate paired samples and return finite float64 arrays of equal length."""
    xs = _coerce(xs_values, "x sample")
    ys = _coerce(ys_values, "y sample")
    if xs.size != ys.size:
        raise InvalidSampleError(f"paired samples differ in length ({xs.size} != {ys.size})")
    if xs.size == 0:
        raise InvalidSampleError("cannot choose bin counts for an empty sample")

    # 成对样本：任一坐标非有限即整行视为不可用
    mask = finite_mask(xs) & finite_mask(ys)
    if not mask.all():
        if get_config().strict_validation:
            raise InvalidSampleError("paired sample contains non-finite values")
        logger.warning("dropping %d non-finite pairs from 2D sample", int((~mask).sum()))
        xs, ys = xs[mask], ys[mask]
        if xs.size == 0:
            raise InvalidSampleError("paired sample has no finite values")
    return xs, ys


def choose_bin_count_2d(xs_values: Iterable[Any], ys_values: Iterable[Any]) -> Tuple[int, int, np.ndarray]:
    """
    Choose a pair of bin counts for paired samples.

    Returns:
        ``(dx, dy, counts)`` where ``counts`` has shape ``(dx, dy)``.

    Raises:
        InvalidSampleError: empty, unusable or unequal-length samples.
    """
    xs, ys = prepare_paired_sample(xs_values, ys_values)
    n = int(xs.size)
    bounds = (float(xs.min()), float(xs.max()), float(ys.min()), float(ys.max()))
    ceiling = get_config().max_bin_count_2d
    dx_max = 1 if bounds[0] == bounds[1] else _candidate_limit(n, ceiling)
    dy_max = 1 if bounds[2] == bounds[3] else _candidate_limit(n, ceiling)

    best = (1, 1)
    best_counts = np.array([[n]], dtype=np.int64)
    best_score = -math.inf
    for dx in range(1, dx_max + 1):
        for dy in range(1, dy_max + 1):
            counts = bin_counts_2d(xs, ys, bounds, dx, dy)
            score = _penalized_likelihood(counts, n, dx * dy)
            if score > best_score:
                best, best_counts, best_score = (dx, dy), counts, score

    logger.debug("selected %dx%d bins for n=%d", best[0], best[1], n)
    return best[0], best[1], best_counts.astype(np.int64)


def _coerce(values: Iterable[Any], label: str) -> np.ndarray:
    try:
        return as_float_array(values)
    except (TypeError, ValueError) as exc:
        raise InvalidSampleError(f"{label} must contain real numbers") from exc
