"""
Scale abstractions consumed by the statistics layer.

Responsibilities:
    * define the ScaleElement capability and its ``apply`` contract
    * carry statistic-derived inputs to a scale (DerivedData)
    * mark values a scale must treat as missing (MISSING)
"""
# 说明：统计层与标度（scale）子系统之间的最小接口。
# 职责：
# - ScaleElement：所有标度的抽象基类，约定 element_aesthetics() 与 apply(records, data)
# - DerivedData：统计变换生成的派生数据集，按通道名承载待映射的值
# - MISSING：显式“缺失”标记，区别于数值 0（如空的二维分箱单元）
# - apply_scale(...)：对外统一入口，把派生数据交给标度并写回目标记录

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence, Tuple

from plotstats.core.aesthetics import AestheticRecord
from plotstats.core.utils.param_validation import ensure_type


class _MissingValue:
    """Singleton marker for values that must not be mapped."""

    _instance: Optional["_MissingValue"] = None

    def __new__(cls) -> "_MissingValue":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_MissingValue":
        return self

    def __deepcopy__(self, memo: Any) -> "_MissingValue":
        return self

    def __reduce__(self) -> str:
        return "MISSING"


MISSING = _MissingValue()


def is_missing(value: Any) -> bool:
    return value is MISSING


@dataclass
class DerivedData:
    """Channel values produced by a statistic and handed to a scale."""
    # 目前只有颜色通道需要经由标度映射；其余通道由统计直接写入记录

    color: Optional[Sequence[Any]] = None


class ScaleElement(ABC):
    """Abstract base class for scales."""

    def __init__(self, name: Optional[str] = None) -> None:
        self.name: str = name or self.__class__.__name__

    @abstractmethod
    def element_aesthetics(self) -> Tuple[str, ...]:
        """Channel names the scale maps."""

    @abstractmethod
    def apply(self, records: Sequence[AestheticRecord], data: DerivedData) -> None:
        """Map ``data`` and write resolved values into each record."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


def apply_scale(scale: ScaleElement, records: Iterable[AestheticRecord], data: DerivedData) -> None:
    """Apply ``scale`` to ``data`` and write the result into ``records``."""
    ensure_type(scale, (ScaleElement,), label="scale")
    ensure_type(data, (DerivedData,), label="data")
    targets = list(records)
    for record in targets:
        ensure_type(record, (AestheticRecord,), label="record")
    scale.apply(targets, data)
