"""
Histogram statistic.

Responsibilities
  - Choose a bin count for ``x`` and write equal-width bins and their counts.

Limitations
  - Overwrites ``x_min``, ``x_max`` and ``y``; other channels are untouched.
"""
# 说明：一维直方图统计，基于 BinCountSelector 自动选择分箱数。
# 职责：
# - 校验 x 通道已设置，计算 [min(x), max(x)] 上的等宽左闭分箱
# - 写入 x_min / x_max（每箱边界）与 y（每箱计数，浮点）

from __future__ import annotations

from typing import Tuple

import numpy as np

from plotstats.core.aesthetics import AestheticRecord
from plotstats.core.utils.logging import get_logger

from .base import ScaleMap, StatisticElement
from .bincount import bin_edges, choose_bin_count_1d, prepare_sample

logger = get_logger(__name__)


class HistogramStatistic(StatisticElement):
    """Bin ``x`` into an automatically sized regular histogram."""

    def element_aesthetics(self) -> Tuple[str, ...]:
        return ("x",)

    def apply(self, scales: ScaleMap, aes: AestheticRecord) -> None:
        aes.assert_defined(self.name, "x")
        xs = prepare_sample(aes.x, label="x sample")
        d, counts = choose_bin_count_1d(xs)

        lo, hi = float(xs.min()), float(xs.max())
        aes.x_min, aes.x_max = bin_edges(lo, hi, d)
        aes.y = np.asarray(counts, dtype=np.float64)
        logger.debug("histogram over [%g, %g] with %d bins", lo, hi, d, extra={"counts": counts})


histogram = HistogramStatistic("histogram")
