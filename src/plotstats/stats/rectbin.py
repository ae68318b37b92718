"""
Rectangular (2D) binning statistic.

Responsibilities
  - Choose bin counts for paired ``x``/``y`` and write per-axis bin edges.
  - Map per-cell occupancy to colors through the configured continuous scale.

Usage Context
  - The cell grid is the cross product of the ``dx`` x-intervals and ``dy``
    y-intervals; the derived color sequence enumerates cells x-major
    (cell ``(i, j)`` at position ``i * dy + j``).

Limitations
  - Requires a ``ContinuousColorScale`` under the ``color`` key.
  - Empty cells are passed as MISSING, so they get no color and do not
    stretch the gradient domain down to zero.
"""
# 说明：二维矩形分箱统计，结合连续颜色标度把每个单元格的计数映射为颜色。
# 职责：
# - 校验 x / y 已设置，调用二维 BinCountSelector 得到 dx、dy 与计数网格
# - 写入 x_min / x_max（长度 dx）与 y_min / y_max（长度 dy），图例标题固定为 "Count"
# - 校验颜色标度存在且为连续型，计数为 0 的单元格映射为 MISSING，再委托 apply_scale 写回颜色

from __future__ import annotations

from typing import Tuple

from plotstats.core.aesthetics import AestheticRecord
from plotstats.core.exceptions import IncompatibleScaleError
from plotstats.core.utils.logging import get_logger
from plotstats.scales.base import MISSING, DerivedData, ScaleElement, apply_scale
from plotstats.scales.color import ContinuousColorScale, color_gradient

from .base import ScaleMap, StatisticElement
from .bincount import bin_edges, choose_bin_count_2d, prepare_paired_sample

logger = get_logger(__name__)

COLOR_KEY_TITLE = "Count"


class RectangularBinStatistic(StatisticElement):
    """Bin paired ``x``/``y`` values into a grid colored by occupancy."""

    def element_aesthetics(self) -> Tuple[str, ...]:
        return ("x", "y", "color")

    def default_scales(self) -> Tuple[ScaleElement, ...]:
        return (color_gradient,)

    def apply(self, scales: ScaleMap, aes: AestheticRecord) -> None:
        aes.assert_defined(self.name, "x", "y")
        color_scale = self.require_scale(scales, "color")
        if not isinstance(color_scale, ContinuousColorScale):
            raise IncompatibleScaleError(f"{self.name} requires a continuous color scale.")

        xs, ys = prepare_paired_sample(aes.x, aes.y)
        dx, dy, counts = choose_bin_count_2d(xs, ys)

        aes.x_min, aes.x_max = bin_edges(float(xs.min()), float(xs.max()), dx)
        aes.y_min, aes.y_max = bin_edges(float(ys.min()), float(ys.max()), dy)
        aes.color_key_title = COLOR_KEY_TITLE

        data = DerivedData(color=[MISSING if cnt < 1 else int(cnt) for cnt in counts.ravel()])
        logger.debug("rectbin grid %dx%d, %d empty cells", dx, dy, int((counts == 0).sum()))
        apply_scale(color_scale, [aes], data)


rectbin = RectangularBinStatistic("rectbin")
