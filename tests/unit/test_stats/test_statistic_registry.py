"""
Unit tests for the statistic registry.
"""
# 说明：StatisticType 枚举、注册表查找与快照导出的单元测试。
# 覆盖：
# - from_str：大小写不敏感、别名与连字符规范化
# - get_statistic：字符串 / 枚举 / 实例三种标识，未知标识抛出 ParamValidationError
# - registered_statistics_snapshot：覆盖全部已注册统计

import pytest

from plotstats.core import ParamValidationError
from plotstats.stats import (
    STATISTIC_REGISTRY,
    StatisticType,
    TickStatistic,
    boxplot,
    get_statistic,
    histogram,
    normalize_statistic,
    rectbin,
    registered_statistics_snapshot,
    x_ticks,
    y_ticks,
)


def test_from_str_aliases() -> None:
    # 别名与大小写变体都解析到规范枚举
    assert StatisticType.from_str("Histogram") is StatisticType.HISTOGRAM
    assert StatisticType.from_str("xticks") is StatisticType.X_TICKS
    assert StatisticType.from_str("Y-Ticks") is StatisticType.Y_TICKS
    assert StatisticType.from_str("rectangular_bin") is StatisticType.RECTBIN


def test_from_str_unknown() -> None:
    # 未知名称
    with pytest.raises(ParamValidationError):
        StatisticType.from_str("violin")


def test_get_statistic_resolves_identifiers() -> None:
    # 字符串、枚举与实例都能解析到同一个单例
    assert get_statistic("boxplot") is boxplot
    assert get_statistic(StatisticType.HISTOGRAM) is histogram
    assert get_statistic(rectbin) is rectbin
    custom = TickStatistic(["x"], "xtick")
    assert get_statistic(custom) is custom


def test_normalize_rejects_non_strings() -> None:
    # 非字符串 / 非枚举标识
    with pytest.raises(ParamValidationError):
        normalize_statistic(42)  # type: ignore[arg-type]


def test_registry_and_snapshot() -> None:
    # 注册表覆盖全部统计类型，快照为 名称 -> 类名
    assert set(STATISTIC_REGISTRY) == set(StatisticType)
    snapshot = registered_statistics_snapshot()
    assert snapshot["histogram"] == "HistogramStatistic"
    assert snapshot["x_ticks"] == snapshot["y_ticks"] == "TickStatistic"
    assert STATISTIC_REGISTRY[StatisticType.X_TICKS] is x_ticks
    assert STATISTIC_REGISTRY[StatisticType.Y_TICKS] is y_ticks
