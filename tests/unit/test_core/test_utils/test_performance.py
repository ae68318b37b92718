"""
Unit tests for timing helpers.
"""
# 说明：计时工具（Timer / time_call）的单元测试。
# 覆盖：
# - Timer：作为上下文管理器或装饰器使用时记录 elapsed，并可选写入 DEBUG 日志
# - Timer 在代码块抛错时不写日志，异常照常传播
# - time_call(...)：返回调用结果与耗时（秒）

import logging
from time import sleep

import pytest

from plotstats.core.utils import Timer, time_call


def test_timer_context_manager() -> None:
    # 验证 Timer 作为上下文管理器使用时，是否会记录正的 elapsed 值与标签
    with Timer("work") as timer:
        sleep(0.001)
    assert timer.elapsed > 0
    assert timer.elapsed_ms == pytest.approx(timer.elapsed * 1000.0)
    assert timer.end is not None and timer.end >= timer.start


def test_timer_as_decorator() -> None:
    # ContextDecorator：被装饰函数正常返回
    @Timer()
    def compute() -> int:
        return 42

    assert compute() == 42


def test_timer_logs_at_debug(caplog) -> None:
    # 传入 logger 时退出代码块写一条 DEBUG 日志
    logger = logging.getLogger("plotstats.test.timer")
    with caplog.at_level(logging.DEBUG, logger="plotstats.test.timer"):
        with Timer("binning", logger=logger):
            pass
    assert any(r.getMessage().startswith("binning took") for r in caplog.records)


def test_timer_skips_log_on_error(caplog) -> None:
    # 代码块抛错时不记录耗时，异常向上传播
    logger = logging.getLogger("plotstats.test.timer.err")
    with caplog.at_level(logging.DEBUG, logger="plotstats.test.timer.err"):
        with pytest.raises(RuntimeError):
            with Timer("failing", logger=logger):
                raise RuntimeError("boom")
    assert not caplog.records


def test_time_call_returns_result_and_elapsed() -> None:
    # time_call 返回 (结果, 非负耗时)
    result, elapsed = time_call(sum, [1, 2, 3])
    assert result == 6
    assert elapsed >= 0
