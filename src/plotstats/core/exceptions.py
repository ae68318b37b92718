"""
Error hierarchy for the statistics layer.

Responsibilities
  - Define shared exception types for sample, aesthetic and scale failures.
  - Carry structured context (owning statistic, missing channels) for callers.

Usage Context
  - Raised synchronously by statistics and the bin-count selector; the
    dispatcher never catches them, so one failure aborts the whole pass.

Limitations
  - Exceptions only carry message text and optional context attributes.
"""
# 说明：统计层的异常体系，统一样本、图形通道（aesthetic）与标度（scale）相关的错误类型。
# 职责：
# - StatisticError：统计子模块统一基类异常
# - InvalidSampleError：分箱数选择收到空样本或不可用样本时抛出
# - MissingAestheticError：统计所需的输入通道未设置时抛出
# - MissingScaleError / IncompatibleScaleError：矩形分箱缺少颜色标度或标度类型不是连续型时抛出

from __future__ import annotations

from typing import Iterable, Optional


class StatisticError(Exception):
    """
    Base error type for statistics layer failures.

    - Configuration
      - No additional fields beyond the error message.

    - Behavior
      - Serves as the common ancestor for statistic-specific exceptions.

    - Usage Notes
      - Catch to handle every configuration/usage error of a statistics pass.
    """


class InvalidSampleError(StatisticError, ValueError):
    """
    Raised when a sample cannot be binned.

    - Behavior
      - Signals an empty sample, non-finite values under strict validation,
        or paired samples of unequal length.
    """


class MissingAestheticError(StatisticError):
    """
    Raised when a statistic's required input channel is unset.

    - Configuration
      - owner: Name of the statistic that required the channels.
      - missing: Channel names that were unset.

    - Behavior
      - Formats a message listing every missing channel.
    """

    def __init__(self, owner: str, missing: Iterable[str], *, message: Optional[str] = None) -> None:
        # 记录发起校验的统计名称与缺失通道列表，便于上层定位映射配置错误
        self.owner = owner
        self.missing = tuple(missing)
        names = ", ".join(self.missing)
        super().__init__(message or f"{owner} requires the following aesthetics to be defined: {names}")


class MissingScaleError(StatisticError):
    """Raised when a statistic needs a scale that the active configuration lacks."""


class IncompatibleScaleError(StatisticError, TypeError):
    """Raised when the configured scale does not provide the required capability."""
