"""
Unit tests for the aesthetic record.
"""
# 说明：AestheticRecord 与 format_label 的单元测试。
# 覆盖：
# - 所有数据通道默认未设置（None），标签函数默认 format_label
# - get / set / is_set：按名称访问，未知名称抛出 ParamValidationError
# - defined_channels：列出已设置的数据通道，空序列也算已设置
# - assert_defined：缺失通道时抛出 MissingAestheticError，并携带统计名与缺失列表
# - copy：深拷贝数据通道

import pytest

from plotstats.core import (
    LABEL_FIELDS,
    AestheticRecord,
    MissingAestheticError,
    ParamValidationError,
    format_label,
)


def test_record_defaults_unset() -> None:
    # 新记录没有任何已设置的数据通道
    aes = AestheticRecord()
    assert aes.defined_channels() == []
    assert aes.x is None and aes.xtick is None
    for name in LABEL_FIELDS:
        assert aes.get(name) is format_label


def test_format_label() -> None:
    # 数值使用紧凑的 %g 风格；其它值按 str 渲染
    assert format_label(3.0) == "3"
    assert format_label(0.25) == "0.25"
    assert format_label(7) == "7"
    assert format_label("a") == "a"
    assert format_label(True) == "True"


def test_get_set_and_is_set() -> None:
    # 按名称读写；空序列依然视为“已设置”
    aes = AestheticRecord()
    aes.set("y", [])
    assert aes.is_set("y")
    assert aes.get("y") == []
    assert not aes.is_set("x")
    assert aes.defined_channels() == ["y"]


def test_unknown_channel_rejected() -> None:
    # 未知通道名立即报错，而不是静默返回 None
    aes = AestheticRecord()
    with pytest.raises(ParamValidationError):
        aes.get("size")
    with pytest.raises(ParamValidationError):
        aes.set("size", [1])


def test_assert_defined_lists_missing_channels() -> None:
    # 缺失多个通道时，异常中包含全部缺失项
    aes = AestheticRecord(x=[1.0])
    aes.assert_defined("histogram", "x")
    with pytest.raises(MissingAestheticError) as excinfo:
        aes.assert_defined("rectbin", "x", "y", "color")
    assert excinfo.value.owner == "rectbin"
    assert excinfo.value.missing == ("y", "color")
    assert "rectbin" in str(excinfo.value)


def test_copy_is_deep() -> None:
    # 修改副本的数据通道不影响原记录
    aes = AestheticRecord(x=[1.0, 2.0])
    clone = aes.copy()
    clone.x.append(3.0)
    assert aes.x == [1.0, 2.0]
