"""
Continuous and discrete color scales.

Responsibilities
  - ContinuousColorScale: map numeric values onto a two-color gradient and
    build a legend from nice ticks over the data domain.
  - DiscreteColorScale: map categorical levels onto a cycled palette.

Usage Context
  - RectangularBinStatistic requires a continuous scale under the ``color``
    key of the active scale mapping; ``color_gradient`` is its default.

Limitations
  - Colors are interpolated in RGB through matplotlib colormaps.
  - The continuous domain is always the [min, max] of the mapped values.
"""
# 说明：连续型与离散型颜色标度的最小实现，颜色插值与调色板取自 matplotlib.colors / colormaps。
# 职责：
# - ContinuousColorScale：数值 -> 渐变色；MISSING 映射为 None；图例取 optimize_ticks 的刻度
# - DiscreteColorScale：类别水平（按首次出现顺序）-> 循环调色板
# - color_gradient / color_hue：无状态的全局单例，供统计的 default_scales 使用
# 约定：
# - apply 会覆写记录的 color / color_key_colors / color_key_continuous 三个字段

from __future__ import annotations

import numbers
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np
from matplotlib import colormaps
from matplotlib.colors import LinearSegmentedColormap, to_hex

from plotstats.core.aesthetics import AestheticRecord
from plotstats.core.tick_optimizer import optimize_ticks
from plotstats.core.utils.logging import get_logger
from plotstats.core.utils.param_validation import ParamValidationError, ensure

from .base import DerivedData, ScaleElement, is_missing

logger = get_logger(__name__)


class ContinuousColorScale(ScaleElement):
    """
    Map numeric values onto a continuous color gradient.

    - Configuration
      - low: Color for the domain minimum (any matplotlib color spec).
      - high: Color for the domain maximum.

    - Behavior
      - Domain is the [min, max] of the non-missing values.
      - Missing values resolve to ``None``.

    - Usage Notes
      - A constant domain maps every value to the gradient midpoint.
    """

    def __init__(self, low: str = "#132B43", high: str = "#56B1F7", *, name: Optional[str] = None) -> None:
        super().__init__(name=name or "color_gradient")
        self.low = low
        self.high = high
        self._cmap = LinearSegmentedColormap.from_list(self.name, [low, high])

    def element_aesthetics(self) -> Tuple[str, ...]:
        return ("color",)

    def color_at(self, fraction: float) -> str:
        """Hex color at ``fraction`` in [0, 1] along the gradient."""
        return to_hex(self._cmap(float(np.clip(fraction, 0.0, 1.0))))

    def _numeric(self, value: Any) -> float:
        ensure(
            isinstance(value, numbers.Real) and not isinstance(value, bool),
            f"{self.name} can only map numeric values, got {value!r}",
            error=ParamValidationError,
        )
        return float(value)

    def apply(self, records: Sequence[AestheticRecord], data: DerivedData) -> None:
        if data.color is None:
            return
        values: List[Optional[float]] = [None if is_missing(v) else self._numeric(v) for v in data.color]
        present = [v for v in values if v is not None]

        colors: List[Optional[str]] = []
        key_colors: Dict[Any, str] = {}
        if present:
            lo, hi = min(present), max(present)
            span = hi - lo

            def fraction(v: float) -> float:
                return 0.5 if span == 0 else (v - lo) / span

            colors = [None if v is None else self.color_at(fraction(v)) for v in values]
            for tick in optimize_ticks(lo, hi):
                if lo <= tick <= hi:
                    key_colors[tick] = self.color_at(fraction(tick))
        else:
            colors = [None for _ in values]

        logger.debug(
            "%s mapped %d values (%d missing)",
            self.name,
            len(values),
            len(values) - len(present),
        )
        for record in records:
            record.color = list(colors)
            record.color_key_colors = dict(key_colors)
            record.color_key_continuous = True


class DiscreteColorScale(ScaleElement):
    """
    Map categorical levels onto a fixed palette.

    - Configuration
      - palette: Sequence of colors, cycled when levels outnumber it
        (defaults to matplotlib's ``tab10``).
      - levels: Optional explicit level order.
    """

    def __init__(
        self,
        palette: Optional[Sequence[str]] = None,
        *,
        levels: Optional[Sequence[Any]] = None,
        name: Optional[str] = None,
    ) -> None:
        super().__init__(name=name or "color_hue")
        if palette is None:
            palette = [to_hex(c) for c in colormaps["tab10"].colors]
        ensure(len(palette) > 0, "palette must contain at least one color")
        self.palette = [to_hex(c) for c in palette]
        self.levels = list(levels) if levels is not None else None

    def element_aesthetics(self) -> Tuple[str, ...]:
        return ("color",)

    def apply(self, records: Sequence[AestheticRecord], data: DerivedData) -> None:
        if data.color is None:
            return
        levels: List[Any] = list(self.levels) if self.levels is not None else []
        for value in data.color:
            if not is_missing(value) and value not in levels:
                levels.append(value)
        mapping = {level: self.palette[i % len(self.palette)] for i, level in enumerate(levels)}
        colors = [None if is_missing(v) else mapping[v] for v in data.color]
        for record in records:
            record.color = list(colors)
            record.color_key_colors = dict(mapping)
            record.color_key_continuous = False


color_gradient = ContinuousColorScale()
color_hue = DiscreteColorScale()
