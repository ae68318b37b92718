"""
Boxplot statistic.

Responsibilities
  - Group ``y`` by the composite key ``(x, color)``.
  - Compute hinges, median, fences and outliers per group.
  - Replace the per-row ``x``/``y``/``color`` channels with per-group values.

Usage Context
  - Hinges and median are linear-interpolation quantiles (numpy
    ``method="linear"``): for sorted values ``v`` and probability ``p`` the
    quantile sits at position ``(n - 1) * p``, interpolated between neighbours.
  - Fences are ``lower_hinge - k * iqr`` and ``upper_hinge + k * iqr`` with
    ``k = RuntimeConfig.fence_coefficient`` (1.5 by default).

Limitations
  - Group order is the order in which keys are first seen; every per-group
    array shares it.
  - ``y`` must be numeric; ``x`` and ``color`` may be any hashable values.
"""
# 说明：箱线图统计，按 (x, color) 复合键动态分组并计算五数概括与离群值。
# 职责：
# - GroupKey / GroupAccumulator：可哈希复合键与累加器，分组映射按插入顺序迭代
# - 未设置的 x / color 视为常量哨兵 None；较短的 x / color 按行循环复用
# - 每组计算 0.25 / 0.5 / 0.75 分位数、IQR、上下栅栏，以及严格落在栅栏之外的离群值
# - 处理完成后，用各组的 x / color 键替换原通道，y 替换为各组中位数，丢弃逐行数据

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Tuple

import numpy as np

from plotstats.core.aesthetics import AestheticRecord
from plotstats.core.utils.config import get_config
from plotstats.core.utils.logging import get_logger
from plotstats.core.utils.math_utils import as_float_array, quantiles
from plotstats.core.utils.param_validation import ParamValidationError

from .base import ScaleMap, StatisticElement

logger = get_logger(__name__)

QUANTILE_LEVELS: Tuple[float, float, float] = (0.25, 0.5, 0.75)


@dataclass(frozen=True)
class GroupKey:
    """Composite grouping key; ``None`` stands for an unset channel."""

    x: Hashable = None
    color: Hashable = None


@dataclass
class GroupAccumulator:
    """Values collected for one group."""

    values: List[float] = field(default_factory=list)

    def add(self, value: float) -> None:
        self.values.append(value)


@dataclass
class GroupSummary:
    lower_hinge: float
    middle: float
    upper_hinge: float
    lower_fence: float
    upper_fence: float
    outliers: np.ndarray


def summarize_group(values: List[float], fence_coefficient: float) -> GroupSummary:
    """Quartiles, Tukey fences and outliers of one group."""
    arr = np.asarray(values, dtype=np.float64)
    lower, middle, upper = (float(q) for q in quantiles(arr, QUANTILE_LEVELS))
    iqr = upper - lower
    lower_fence = lower - fence_coefficient * iqr
    upper_fence = upper + fence_coefficient * iqr
    outliers = arr[(arr < lower_fence) | (arr > upper_fence)]
    return GroupSummary(lower, middle, upper, lower_fence, upper_fence, outliers)


class BoxplotStatistic(StatisticElement):
    """Summarize ``y`` per ``(x, color)`` group as boxplot geometry."""

    def element_aesthetics(self) -> Tuple[str, ...]:
        return ("x", "y")

    @staticmethod
    def _has_keys(channel) -> bool:
        # 空序列与未设置同等对待：不参与分组，也不会被改写
        return channel is not None and len(channel) > 0

    def _group(self, aes: AestheticRecord) -> Dict[GroupKey, GroupAccumulator]:
        try:
            ys = as_float_array(aes.y)
        except (TypeError, ValueError) as exc:
            raise ParamValidationError(f"{self.name} requires numeric y values") from exc

        # 未设置的通道按单元素 [None] 循环，即所有行共享同一个哨兵键
        xs = aes.x if self._has_keys(aes.x) else [None]
        colors = aes.color if self._has_keys(aes.color) else [None]

        groups: Dict[GroupKey, GroupAccumulator] = {}
        for x, y, c in zip(itertools.cycle(xs), ys, itertools.cycle(colors)):
            key = GroupKey(x, c)
            if key not in groups:
                groups[key] = GroupAccumulator()
            groups[key].add(float(y))
        return groups

    def apply(self, scales: ScaleMap, aes: AestheticRecord) -> None:
        aes.assert_defined(self.name, "y")
        group_x = self._has_keys(aes.x)
        group_color = self._has_keys(aes.color)
        groups = self._group(aes)
        coefficient = float(get_config().fence_coefficient)

        summaries = [summarize_group(acc.values, coefficient) for acc in groups.values()]
        aes.lower_hinge = np.array([s.lower_hinge for s in summaries], dtype=np.float64)
        aes.middle = np.array([s.middle for s in summaries], dtype=np.float64)
        aes.upper_hinge = np.array([s.upper_hinge for s in summaries], dtype=np.float64)
        aes.lower_fence = np.array([s.lower_fence for s in summaries], dtype=np.float64)
        aes.upper_fence = np.array([s.upper_fence for s in summaries], dtype=np.float64)
        aes.outliers = [s.outliers for s in summaries]

        keys = list(groups.keys())
        if group_x:
            aes.x = [key.x for key in keys]
        if group_color:
            aes.color = [key.color for key in keys]
        aes.y = aes.middle.copy()

        logger.debug(
            "boxplot summarized %d groups, %d outliers",
            len(keys),
            sum(len(s.outliers) for s in summaries),
        )


boxplot = BoxplotStatistic("boxplot")
