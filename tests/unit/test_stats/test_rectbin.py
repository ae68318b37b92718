"""
Unit tests for the rectangular binning statistic.
"""
# 说明：RectangularBinStatistic 的单元测试。
# 覆盖：
# - 缺少 x / y 通道、缺少颜色标度、颜色标度不是连续型时的错误类型
# - 写入 x_min / x_max / y_min / y_max 与逐单元格颜色（x 优先顺序），空单元格颜色为 None
# - 图例标题固定为 "Count"，默认标度为 color_gradient

import pytest

from plotstats.core import (
    AestheticRecord,
    IncompatibleScaleError,
    InvalidSampleError,
    MissingAestheticError,
    MissingScaleError,
)
from plotstats.scales import ContinuousColorScale, color_gradient, color_hue
from plotstats.stats import rectbin


def test_requires_x_and_y() -> None:
    # 未设置 y 时先报通道缺失
    with pytest.raises(MissingAestheticError):
        rectbin.apply({"color": color_gradient}, AestheticRecord(x=[1.0]))


def test_requires_color_scale() -> None:
    # 未配置颜色标度
    with pytest.raises(MissingScaleError):
        rectbin.apply({}, AestheticRecord(x=[1.0], y=[1.0]))


def test_requires_continuous_scale() -> None:
    # 离散颜色标度不能映射计数
    aes = AestheticRecord(x=[1.0], y=[1.0])
    with pytest.raises(IncompatibleScaleError):
        rectbin.apply({"color": color_hue}, aes)
    assert aes.x_min is None


def test_unequal_lengths_rejected() -> None:
    # x 与 y 长度不一致
    with pytest.raises(InvalidSampleError):
        rectbin.apply({"color": color_gradient}, AestheticRecord(x=[1.0, 2.0], y=[1.0]))


def test_default_scales() -> None:
    # 默认颜色标度为连续渐变
    assert rectbin.default_scales() == (color_gradient,)
    assert rectbin.element_aesthetics() == ("x", "y", "color")


def test_constant_sample_single_cell() -> None:
    # 两轴常量：单个单元格，颜色为渐变中点
    scale = ContinuousColorScale(low="#000000", high="#ffffff")
    aes = AestheticRecord(x=[3.0, 3.0], y=[7.0, 7.0])
    rectbin.apply({"color": scale}, aes)
    assert list(aes.x_min) == [3.0] and list(aes.x_max) == [3.0]
    assert list(aes.y_min) == [7.0] and list(aes.y_max) == [7.0]
    assert aes.color == [scale.color_at(0.5)]
    assert aes.color_key_title == "Count"
    assert aes.color_key_continuous is True


def test_grid_colors_and_empty_cells() -> None:
    # 两个对角点簇：只有两个单元格有颜色，其余为空单元格
    xs = [0.0] * 50 + [1.0] * 50
    ys = [0.0] * 50 + [1.0] * 50
    aes = AestheticRecord(x=xs, y=ys)
    rectbin.apply({"color": color_gradient}, aes)
    dx, dy = len(aes.x_min), len(aes.y_min)
    assert len(aes.x_max) == dx and len(aes.y_max) == dy
    assert dx * dy > 1
    assert len(aes.color) == dx * dy
    colored = [i for i, c in enumerate(aes.color) if c is not None]
    # x 优先顺序：单元格 (i, j) 位于 i * dy + j
    assert colored == [0, dx * dy - 1]
