"""Placeholder statistics that leave the aesthetic record untouched."""
# 说明：nil 与 identity 两个占位统计；图层未指定统计时使用，对记录不做任何修改。

from __future__ import annotations

from plotstats.core.aesthetics import AestheticRecord

from .base import ScaleMap, StatisticElement


class NilStatistic(StatisticElement):
    """Absence of a statistic."""

    def apply(self, scales: ScaleMap, aes: AestheticRecord) -> None:
        return None


class IdentityStatistic(StatisticElement):
    """Pass mapped aesthetics through unchanged."""

    def apply(self, scales: ScaleMap, aes: AestheticRecord) -> None:
        return None


nil = NilStatistic("nil")
identity = IdentityStatistic("identity")
