"""
Unit tests for the statistics error hierarchy.
"""
# 说明：统计层异常体系的单元测试。
# 覆盖：
# - 所有异常均继承自 StatisticError
# - InvalidSampleError 兼容 ValueError，IncompatibleScaleError 兼容 TypeError
# - MissingAestheticError 的默认消息与自定义消息

from plotstats.core import (
    IncompatibleScaleError,
    InvalidSampleError,
    MissingAestheticError,
    MissingScaleError,
    StatisticError,
)


def test_hierarchy() -> None:
    # 调用方可以统一捕获 StatisticError
    for exc_type in (InvalidSampleError, MissingAestheticError, MissingScaleError, IncompatibleScaleError):
        assert issubclass(exc_type, StatisticError)
    assert issubclass(InvalidSampleError, ValueError)
    assert issubclass(IncompatibleScaleError, TypeError)


def test_missing_aesthetic_message() -> None:
    # 默认消息列出所有缺失通道；显式消息优先
    err = MissingAestheticError("boxplot", ["y"])
    assert str(err) == "boxplot requires the following aesthetics to be defined: y"
    custom = MissingAestheticError("boxplot", ["y"], message="no y")
    assert str(custom) == "no y"
    assert custom.missing == ("y",)
