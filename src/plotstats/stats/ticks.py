"""
Tick statistic.

Responsibilities
  - Gather the values of every set input channel.
  - Use the observed values directly when all of them are exact integers,
    otherwise delegate to ``optimize_ticks`` over their range.
  - Propagate the label function of the first input channel to the tick
    channel.

Limitations
  - The label function is copied from ``in_vars[0]`` even when that channel
    contributed no values.
"""
# 说明：刻度统计，从一组输入通道收集数值并写出刻度通道（xtick / ytick）。
# 职责：
# - 只读取已设置的输入通道；未设置的通道直接跳过
# - 所有值均为精确整数时：排序去重后的观测值即为刻度
# - 否则：在 [min, max] 上调用扩展 Wilkinson 刻度优化
# - 没有收集到任何值时写出空刻度列表
# - 非有限值：严格模式下抛出 InvalidSampleError；非严格模式下记录警告后剔除

from __future__ import annotations

import numbers
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

from plotstats.core.aesthetics import AestheticRecord
from plotstats.core.exceptions import InvalidSampleError
from plotstats.core.tick_optimizer import optimize_ticks
from plotstats.core.utils.config import get_config
from plotstats.core.utils.logging import get_logger
from plotstats.core.utils.math_utils import finite_mask, is_integral
from plotstats.core.utils.param_validation import ParamValidationError, ensure

from .base import ScaleMap, StatisticElement

logger = get_logger(__name__)


def _is_numeric(value: Any) -> bool:
    return isinstance(value, numbers.Real)


class TickStatistic(StatisticElement):
    """
    Derive a tick channel from one or more input channels.

    - Configuration
      - ``in_vars``: channels to read, in order; at least one.
      - ``out_var``: tick channel to write (``xtick`` or ``ytick``).

    - Behavior
      - Output is ascending and deduplicated.
      - ``<out_var>_label`` receives ``<in_vars[0]>_label``.
    """

    def __init__(self, in_vars: Sequence[str], out_var: str, name: Optional[str] = None) -> None:
        super().__init__(name or f"{out_var}s")
        in_vars = tuple(in_vars)
        ensure(len(in_vars) > 0, "TickStatistic needs at least one input channel")
        fields = AestheticRecord.field_names()
        for var in in_vars + (out_var,):
            ensure(var in fields, f"unknown aesthetic '{var}'")
        self.in_vars: Tuple[str, ...] = in_vars
        self.out_var = out_var

    def element_aesthetics(self) -> Tuple[str, ...]:
        return self.in_vars

    def gather(self, aes: AestheticRecord) -> List[Any]:
        values: List[Any] = []
        for var in self.in_vars:
            channel = aes.get(var)
            if channel is None:
                continue
            values.extend(np.asarray(channel, dtype=object).reshape(-1).tolist())
        return values

    def _drop_non_finite(self, values: List[Any]) -> List[Any]:
        if not values:
            return values
        mask = finite_mask(values)
        if mask.all():
            return values
        if get_config().strict_validation:
            raise InvalidSampleError(f"{self.name} input contains non-finite values")
        logger.warning("dropping %d non-finite values from %s", int((~mask).sum()), self.name)
        return [v for v, keep in zip(values, mask) if keep]

    def apply(self, scales: ScaleMap, aes: AestheticRecord) -> None:
        values = self.gather(aes)
        bad = [v for v in values if not _is_numeric(v)]
        if bad:
            raise ParamValidationError(f"{self.name} requires numeric values, got {bad[0]!r}")
        values = self._drop_non_finite(values)

        if not values:
            ticks: List[float] = []
        elif all(is_integral(v) for v in values):
            ticks = sorted({float(v) for v in values})
        else:
            arr = np.asarray(values, dtype=np.float64)
            ticks = optimize_ticks(float(arr.min()), float(arr.max()))

        aes.set(self.out_var, ticks)
        aes.set(f"{self.out_var}_label", aes.get(f"{self.in_vars[0]}_label"))
        logger.debug("%s placed %d ticks", self.name, len(ticks), extra={"values": ticks})

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self.in_vars)!r}, {self.out_var!r})"


x_ticks = TickStatistic(["x"], "xtick", name="x_ticks")
y_ticks = TickStatistic(
    ["y", "middle", "lower_hinge", "upper_hinge", "lower_fence", "upper_fence"],
    "ytick",
    name="y_ticks",
)
