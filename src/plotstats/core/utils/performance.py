"""
Timing helpers for statistics passes.

Responsibilities
  - Time a block or a callable with a high-resolution clock.
  - Optionally report the measurement to a logger at DEBUG level.

Limitations
  - Wall-clock timings only; no memory or CPU accounting.
"""
# 说明：统计分发器使用的计时工具。
# 职责：
# - Timer：上下文管理器 / 装饰器，退出时记录耗时，并可选地写入 DEBUG 日志
# - time_call(...)：执行一次调用，返回 (结果, 耗时秒数)

from __future__ import annotations

import logging
import time
from contextlib import ContextDecorator
from typing import Any, Callable, Optional, Tuple


class Timer(ContextDecorator):
    """
    Measure the wall-clock duration of a block.

    - Configuration
      - label: Name used in the log message.
      - logger: When given, the duration is logged at DEBUG on exit.

    - Behavior
      - ``elapsed`` holds seconds once the block exits, even when it raised.
    """

    def __init__(self, label: Optional[str] = None, *, logger: Optional[logging.Logger] = None) -> None:
        self.label = label
        self.logger = logger
        self.start: float = 0.0
        self.end: Optional[float] = None
        self.elapsed: float = 0.0

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed * 1000.0

    def __enter__(self) -> "Timer":
        self.start = time.perf_counter()
        self.end = None
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.end = time.perf_counter()
        self.elapsed = self.end - self.start
        # 出错时不记录耗时，异常照常向上传播
        if self.logger is not None and exc_type is None:
            self.logger.debug("%s took %.3fms", self.label or "block", self.elapsed_ms)


def time_call(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Tuple[Any, float]:
    """Call ``func`` once and return ``(result, elapsed_seconds)``."""
    with Timer() as timer:
        result = func(*args, **kwargs)
    return result, timer.elapsed
