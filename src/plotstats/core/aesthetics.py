"""
Aesthetic record shared by every statistic in a plot-rendering pass.

Responsibilities:
    * hold scalar, interval, boxplot, tick and legend channels as optional fields
    * distinguish "unset" (``None``) from empty or zero-valued channels
    * provide name-based access and required-channel assertions for statistics
"""
# 说明：统计层读写的共享可变数据结构（AestheticRecord），一次渲染流程内由管线独占。
# 职责：
# - 以可选字段（默认 None，表示“未设置”）保存标量通道、区间通道、箱线图通道、刻度通道与图例信息
# - 标签函数（*_label）是 值 -> 显示字符串 的可调用对象，默认使用 format_label
# - 提供按名称读写、列出已设置通道以及断言必需通道存在的工具方法
# 约定：
# - 绝不把未设置的通道默认为 0 或空序列：TickStatistic 依赖“真正缺失”来跳过通道
# - 未知通道名统一抛出 ParamValidationError

from __future__ import annotations

import copy as _copy
import numbers
from dataclasses import dataclass, field, fields
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from .exceptions import MissingAestheticError
from .utils.param_validation import ParamValidationError

Labeler = Callable[[Any], str]


def format_label(value: Any) -> str:
    """Render a tick or key value compactly (``3.0`` -> ``"3"``, ``0.25`` -> ``"0.25"``)."""
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        return f"{float(value):g}"
    return str(value)


# 标签函数字段名：它们不是数据通道，不参与 defined_channels 的统计
LABEL_FIELDS: Tuple[str, ...] = ("x_label", "y_label", "color_label", "xtick_label", "ytick_label")


@dataclass
class AestheticRecord:
    """
    Field-sparse record of aesthetic channels.

    - Configuration
      - Scalar channels: x, y, color.
      - Interval channels: x_min, x_max, y_min, y_max.
      - Boxplot channels: middle, lower_hinge, upper_hinge, lower_fence,
        upper_fence (one value per group) and outliers (one array per group).
      - Tick channels: xtick, ytick, plus the ``*_label`` functions.
      - Legend: color_key_title, color_key_colors, color_key_continuous.

    - Behavior
      - Every data field defaults to ``None`` meaning "unset".
      - Statistics mutate the record in place.

    - Usage Notes
      - Use ``is_set`` rather than truthiness: an empty channel is still set.
    """

    x: Optional[Sequence[Any]] = None
    y: Optional[Sequence[Any]] = None
    color: Optional[Sequence[Any]] = None

    x_min: Optional[Sequence[float]] = None
    x_max: Optional[Sequence[float]] = None
    y_min: Optional[Sequence[float]] = None
    y_max: Optional[Sequence[float]] = None

    middle: Optional[Sequence[float]] = None
    lower_hinge: Optional[Sequence[float]] = None
    upper_hinge: Optional[Sequence[float]] = None
    lower_fence: Optional[Sequence[float]] = None
    upper_fence: Optional[Sequence[float]] = None
    outliers: Optional[List[Sequence[float]]] = None

    xtick: Optional[List[float]] = None
    ytick: Optional[List[float]] = None

    x_label: Labeler = field(default=format_label)
    y_label: Labeler = field(default=format_label)
    color_label: Labeler = field(default=format_label)
    xtick_label: Labeler = field(default=format_label)
    ytick_label: Labeler = field(default=format_label)

    color_key_title: Optional[str] = None
    color_key_colors: Optional[Dict[Any, str]] = None
    color_key_continuous: Optional[bool] = None

    # 通道访问 ---------------------------------------------------------------
    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def _check_name(self, name: str) -> None:
        # 统一的通道名校验：拼写错误在这里立即暴露，而不是静默地读到 None
        if name not in self.field_names():
            raise ParamValidationError(f"unknown aesthetic '{name}'")

    def get(self, name: str) -> Any:
        self._check_name(name)
        return getattr(self, name)

    def set(self, name: str, value: Any) -> None:
        self._check_name(name)
        setattr(self, name, value)

    def is_set(self, name: str) -> bool:
        """True when the channel holds a value (an empty sequence counts as set)."""
        return self.get(name) is not None

    def defined_channels(self) -> List[str]:
        """Names of set data channels, label functions excluded."""
        return [name for name in self.field_names() if name not in LABEL_FIELDS and getattr(self, name) is not None]

    def assert_defined(self, owner: str, *names: str) -> None:
        """Raise MissingAestheticError naming every unset channel among ``names``."""
        missing = [name for name in names if not self.is_set(name)]
        if missing:
            raise MissingAestheticError(owner, missing)

    def copy(self) -> "AestheticRecord":
        # 深拷贝数据通道；标签函数按引用共享
        return _copy.deepcopy(self)
