"""
Nice tick placement for a numeric interval.

Implements the extended Wilkinson search of Talbot, Lin and Hanrahan
("An Extension of Wilkinson's Algorithm for Positioning Tick Labels on
Axes", InfoVis 2010). Candidate steps are ``j * q * 10**z`` for ``q`` in a
preference-ordered list of nice numbers; every labeling is scored by

  - simplicity: earlier ``q``, small skip ``j``, and zero included;
  - coverage: how tightly the labels bracket the data range;
  - density: closeness of the tick count to the target count;
  - legibility: constant here (formatting is left to label functions).

Upper bounds of each component prune the search, so it terminates without
an explicit iteration cap.

Responsibilities
  - optimize_ticks(...): standalone ``(lo, hi) -> ascending tick list``.

Limitations
  - Linear axes only; no log or time-aware steps.
"""
# 说明：给定数值区间 [lo, hi]，用扩展 Wilkinson 算法挑选“好看”的刻度位置。
# 职责：
# - optimize_ticks：独立可调用的刻度优化入口，与任何通道无关
# - _simplicity / _coverage / _density 及其上界函数：评分与剪枝
# - _search：在跨度缩放到 [1, 10) 的坐标中执行搜索，避免极窄区间下溢与极宽区间溢出
# 约定：
# - 输出严格递增且去重；数值按步长精度四舍五入，避免 0.30000000000000004 之类的浮点噪声
# - lo == hi（或跨度相对端点量级可忽略）时返回 [lo]；lo > hi 时自动交换

from __future__ import annotations

import math
import sys
from typing import List, Optional, Sequence, Tuple

from .utils.config import get_config
from .utils.param_validation import ParamValidationError, ensure, finite_real, positive_int, validate_arguments

DEFAULT_Q: Tuple[float, ...] = (1.0, 5.0, 2.0, 2.5, 4.0, 3.0)
# 评分权重：simplicity, coverage, density, legibility
WEIGHTS: Tuple[float, float, float, float] = (0.25, 0.2, 0.5, 0.05)
_EPS = 1e-10


def _simplicity(q_index: int, n_q: int, j: int, lmin: float, lmax: float, lstep: float) -> float:
    # 刻度中包含 0 时额外加分（v = 1）
    remainder = lmin % lstep
    includes_zero = (remainder < _EPS or lstep - remainder < _EPS) and lmin <= 0 <= lmax
    v = 1.0 if includes_zero else 0.0
    return 1.0 - q_index / (n_q - 1) - j + v if n_q > 1 else 1.0 - j + v


def _simplicity_max(q_index: int, n_q: int, j: int) -> float:
    return 1.0 - q_index / (n_q - 1) - j + 1.0 if n_q > 1 else 2.0 - j


def _coverage(dmin: float, dmax: float, lmin: float, lmax: float) -> float:
    span = dmax - dmin
    return 1.0 - 0.5 * ((dmax - lmax) ** 2 + (dmin - lmin) ** 2) / ((0.1 * span) ** 2)


def _coverage_max(dmin: float, dmax: float, span: float) -> float:
    data_span = dmax - dmin
    if span > data_span:
        half = (span - data_span) / 2.0
        return 1.0 - 0.5 * (2.0 * half ** 2) / ((0.1 * data_span) ** 2)
    return 1.0


def _density(k: int, target: int, dmin: float, dmax: float, lmin: float, lmax: float) -> float:
    r = (k - 1) / (lmax - lmin)
    rt = (target - 1) / (max(lmax, dmax) - min(dmin, lmin))
    return 2.0 - max(r / rt, rt / r)


def _density_max(k: int, target: int) -> float:
    if k >= target:
        return 2.0 - (k - 1) / (target - 1)
    return 1.0


def _round_to_step(value: float, step: float, exponent: int = 0) -> float:
    # 按步长的有效小数位四舍五入；step 位于缩放坐标，exponent 为缩放的十进制指数；+ 0.0 把 -0.0 规整为 0.0
    decimals = max(0, -int(math.floor(math.log10(step))) + 1 - exponent)
    return round(value, decimals) + 0.0


def _decimal_exponent(lo: float, hi: float) -> int:
    # 跨度的十进制数量级；跨度溢出为 inf 时改用半跨度估计
    span = hi - lo
    if math.isfinite(span):
        return int(math.floor(math.log10(span)))
    return int(math.floor(math.log10(hi / 2.0 - lo / 2.0) + math.log10(2.0)))


def _to_unit(value: float, exponent: int) -> float:
    return value / 10.0 ** exponent if exponent >= 0 else value * 10.0 ** -exponent


def _from_unit(value: float, exponent: int) -> float:
    return value * 10.0 ** exponent if exponent >= 0 else value / 10.0 ** -exponent


def _search(
    lo: float,
    hi: float,
    target: int,
    k_min: int,
    k_max: int,
    Q: Sequence[float],
) -> Tuple[float, float, float]:
    """Best ``(lmin, lmax, step)`` for ``[lo, hi]`` given ``lo < hi``."""
    n_q = len(Q)
    w = WEIGHTS
    best_score = -2.0
    best: Optional[Tuple[float, float, float]] = None

    j = 1
    searching = True
    while searching:
        for q_index, q in enumerate(Q):
            sm = _simplicity_max(q_index, n_q, j)
            if w[0] * sm + w[1] + w[2] + w[3] < best_score:
                searching = False
                break
            k = max(k_min, 2)
            while k <= k_max:
                dm = _density_max(k, target)
                if w[0] * sm + w[1] + w[2] * dm + w[3] < best_score:
                    break
                delta = (hi - lo) / (k + 1) / j / q
                z = int(math.ceil(math.log10(delta)))
                while True:
                    step = j * q * 10.0 ** z
                    cm = _coverage_max(lo, hi, step * (k - 1))
                    if w[0] * sm + w[1] * cm + w[2] * dm + w[3] < best_score:
                        break
                    min_start = int(math.floor(hi / step)) * j - (k - 1) * j
                    max_start = int(math.ceil(lo / step)) * j
                    for start in range(min_start, max_start + 1):
                        lmin = start * (step / j)
                        lmax = lmin + step * (k - 1)
                        s = _simplicity(q_index, n_q, j, lmin, lmax, step)
                        c = _coverage(lo, hi, lmin, lmax)
                        g = _density(k, target, lo, hi, lmin, lmax)
                        score = w[0] * s + w[1] * c + w[2] * g + w[3] * 1.0
                        if score > best_score:
                            best_score = score
                            best = (lmin, lmax, step)
                    z += 1
                k += 1
        j += 1

    if best is None:
        raise ParamValidationError(f"no tick labeling found for range [{lo}, {hi}]")
    return best


@validate_arguments({"lo": finite_real, "hi": finite_real})
def optimize_ticks(
    lo: float,
    hi: float,
    *,
    target: Optional[int] = None,
    k_min: Optional[int] = None,
    k_max: Optional[int] = None,
    Q: Sequence[float] = DEFAULT_Q,
) -> List[float]:
    """
    Choose tick positions spanning or tightly bracketing ``[lo, hi]``.

    Args:
        lo, hi: Finite data bounds (swapped when ``lo > hi``).
        target: Preferred number of ticks (defaults to config ``tick_target_count``).
        k_min, k_max: Bounds on the number of ticks (config ``tick_min_count`` /
            ``tick_max_count``).
        Q: Nice step mantissas in order of preference.

    Returns:
        Strictly ascending list of tick positions.
    """
    config = get_config()
    target = positive_int(config.tick_target_count if target is None else target)
    k_min = positive_int(config.tick_min_count if k_min is None else k_min)
    k_max = positive_int(config.tick_max_count if k_max is None else k_max)
    ensure(k_min <= k_max, "k_min must not exceed k_max")
    ensure(len(Q) > 0, "Q must contain at least one step mantissa")
    # 目标刻度数至少为 2，否则密度评分的分母 (target - 1) 为 0
    target = max(target, 2)

    if lo > hi:
        lo, hi = hi, lo
    span = hi - lo
    # 相对于端点量级可忽略的跨度，或窄到低于最小规格化浮点数的跨度，视为单点
    if span <= _EPS * max(abs(lo), abs(hi)) or span < sys.float_info.min:
        return [lo + 0.0]

    # 在跨度缩放到 [1, 10) 的坐标中搜索，结果与数量级无关
    exponent = _decimal_exponent(lo, hi)
    lmin, lmax, step = _search(_to_unit(lo, exponent), _to_unit(hi, exponent), target, k_min, k_max, Q)

    count = int(round((lmax - lmin) / step)) + 1
    ticks = set()
    for i in range(count):
        value = _from_unit(lmin + i * step, exponent)
        # 还原后超出浮点表示范围的刻度丢弃
        if math.isfinite(value):
            ticks.add(_round_to_step(value, step, exponent))
    return sorted(ticks)
