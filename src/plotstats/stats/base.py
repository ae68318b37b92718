"""
Core abstraction shared by every statistic implementation.

Responsibilities:
    * uniform ``apply(scales, aes)`` entry point mutating the record in place
    * declared input channels (``element_aesthetics``) and default scales
    * scale lookup helpers with the statistics error taxonomy
"""
# 说明：定义所有统计变换共享的抽象基类。
# 职责：
# - StatisticElement：约定 apply(scales, aes) 的原地变换接口，以及 element_aesthetics / default_scales 声明
# - require_scale：按通道名从当前标度配置中取出标度，缺失时抛出 MissingScaleError
# 约定：
# - 统计实例不持有跨调用状态，全局单例（histogram、boxplot 等）可安全复用
# - apply 出错时直接向上抛出，不做部分回滚

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Mapping, Optional, Tuple

from plotstats.core.aesthetics import AestheticRecord
from plotstats.core.exceptions import MissingScaleError
from plotstats.scales.base import ScaleElement

ScaleMap = Mapping[str, ScaleElement]


class StatisticElement(ABC):
    """Abstract base class for all statistics."""

    def __init__(self, name: Optional[str] = None) -> None:
        self.name: str = name or self.__class__.__name__

    def element_aesthetics(self) -> Tuple[str, ...]:
        """Channels the statistic reads."""
        return ()

    def default_scales(self) -> Tuple[ScaleElement, ...]:
        """Scales the plot layer should add when the user configured none."""
        return ()

    @abstractmethod
    def apply(self, scales: ScaleMap, aes: AestheticRecord) -> None:
        """Transform ``aes`` in place."""

    def require_scale(self, scales: ScaleMap, channel: str) -> ScaleElement:
        # 从标度映射中取出指定通道的标度；未配置时报 MissingScaleError
        scale = scales.get(channel) if scales is not None else None
        if scale is None:
            raise MissingScaleError(f"{self.name} requires a {channel} scale.")
        return scale

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
