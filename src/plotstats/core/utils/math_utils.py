"""
Numerical utilities shared across the statistics layer.

Responsibilities
  - Normalise aesthetic channel values into float64 arrays.
  - Compute linear-interpolation quantiles used by boxplot summaries.
  - Decide whether gathered values are exact integers for tick selection.

Usage Context
  - Use inside statistics when converting channel sequences for numerics.
  - Intended for small helpers reused across modules.

Limitations
  - Assumes numeric inputs convertible to numpy arrays.
  - Integrality is decided per value, not from the container dtype.
"""
# 说明：统计层共享的数值工具函数集合。
# 职责：
# - as_float_array / finite_mask：把通道序列规整为 float64 数组，并标记有限值
# - quantiles：线性插值（Hyndman-Fan 第 7 类）分位数，供箱线图计算 hinge / median
# - is_integral：判断单个值是否为“精确整数”，供刻度统计选择整数集合分支

from __future__ import annotations

import math
import numbers
from typing import Any, Iterable, Sequence, Union

import numpy as np

ArrayLike = Union[Sequence[float], np.ndarray]


def as_float_array(values: Iterable[Any]) -> np.ndarray:
    """Return a one dimensional float64 copy of ``values``."""
    # 对惰性可迭代对象先物化为列表，再统一转换为一维 float64 数组
    if not isinstance(values, np.ndarray):
        values = list(values)
    return np.asarray(values, dtype=np.float64).reshape(-1)


def finite_mask(values: ArrayLike) -> np.ndarray:
    """Boolean mask of finite entries."""
    return np.isfinite(np.asarray(values, dtype=np.float64))


def quantiles(values: ArrayLike, probabilities: Sequence[float]) -> np.ndarray:
    """Linear interpolation quantiles (numpy ``method="linear"``)."""
    # 线性插值分位数：位置 h = (n - 1) * p，在相邻顺序统计量之间线性插值
    arr = np.asarray(values, dtype=np.float64)
    if arr.size == 0:
        raise ValueError("quantiles require at least one value")
    return np.quantile(arr, np.asarray(probabilities, dtype=np.float64), method="linear")


def is_integral(value: Any) -> bool:
    """True when ``value`` is a real number equal to an exact integer."""
    # 布尔值不视为整数；NaN / inf 不是整数；浮点 2.0 视为整数
    if isinstance(value, (bool, np.bool_)):
        return False
    if isinstance(value, numbers.Integral):
        return True
    if isinstance(value, numbers.Real):
        numeric = float(value)
        return math.isfinite(numeric) and numeric.is_integer()
    return False
