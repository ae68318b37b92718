"""
Registry mapping statistic identifiers to the shared statistic instances.

Normalises string or enum identifiers and exposes lookup helpers so plot
layers can name statistics in configuration instead of importing them.
"""
# 说明：为统计变换提供轻量级注册表与查找工具。
# 职责：
# - StatisticType：统计标识枚举，from_str 做大小写与别名规范化
# - STATISTIC_REGISTRY：StatisticType 到全局统计单例的映射
# - get_statistic：字符串 / 枚举 / 实例 -> StatisticElement，未知标识抛出 ParamValidationError
# - registered_statistics_snapshot：为文档与调试导出标识到类名的快照

from __future__ import annotations

import enum
from typing import Dict, Union

from plotstats.core.utils.param_validation import ParamValidationError

from .base import StatisticElement
from .basic import identity, nil
from .boxplot import boxplot
from .histogram import histogram
from .rectbin import rectbin
from .ticks import x_ticks, y_ticks

# 别名 -> 规范名称
_ALIASES: Dict[str, str] = {
    "xticks": "x_ticks",
    "yticks": "y_ticks",
    "rectangular_bin": "rectbin",
    "rectangularbin": "rectbin",
}


class StatisticType(enum.Enum):
    """Supported statistic identifiers."""

    NIL = "nil"
    IDENTITY = "identity"
    HISTOGRAM = "histogram"
    RECTBIN = "rectbin"
    BOXPLOT = "boxplot"
    X_TICKS = "x_ticks"
    Y_TICKS = "y_ticks"

    @classmethod
    def from_str(cls, name: str) -> "StatisticType":
        # 大小写不敏感；空格与连字符统一为下划线后再查别名表
        normalized = name.strip().lower().replace(" ", "_").replace("-", "_")
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls(normalized)
        except ValueError as exc:
            raise ParamValidationError(f"unknown statistic '{name}'") from exc


STATISTIC_REGISTRY: Dict[StatisticType, StatisticElement] = {
    StatisticType.NIL: nil,
    StatisticType.IDENTITY: identity,
    StatisticType.HISTOGRAM: histogram,
    StatisticType.RECTBIN: rectbin,
    StatisticType.BOXPLOT: boxplot,
    StatisticType.X_TICKS: x_ticks,
    StatisticType.Y_TICKS: y_ticks,
}

StatisticIdentifier = Union[str, StatisticType, StatisticElement]


def normalize_statistic(statistic: Union[str, StatisticType]) -> StatisticType:
    """Coerce string or enum to StatisticType, raising on unknown identifiers."""
    if isinstance(statistic, StatisticType):
        return statistic
    if not isinstance(statistic, str):
        raise ParamValidationError(f"unknown statistic '{statistic!r}'")
    return StatisticType.from_str(statistic)


def get_statistic(statistic: StatisticIdentifier) -> StatisticElement:
    """Return the statistic registered for the identifier; instances pass through."""
    if isinstance(statistic, StatisticElement):
        return statistic
    stat_type = normalize_statistic(statistic)
    if stat_type not in STATISTIC_REGISTRY:
        raise ParamValidationError(f"statistic '{stat_type.value}' not registered")
    return STATISTIC_REGISTRY[stat_type]


def registered_statistics_snapshot() -> Dict[str, str]:
    """Snapshot of registered statistics for tooling or docs."""
    return {stat.value: inst.__class__.__name__ for stat, inst in STATISTIC_REGISTRY.items()}
