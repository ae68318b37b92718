"""
Property-based tests for tick placement.
"""
# 说明：optimize_ticks 与 TickStatistic 的属性测试。
# 覆盖：
# - optimize_ticks：输出严格递增，刻度数在 [k_min, k_max] 内
# - 整数输入：刻度为排序去重后的观测值，且再次作用于刻度本身时结果不变（幂等）
# - 任意有限输入：刻度严格递增且无重复

from hypothesis import given, settings

from plotstats.core import AestheticRecord
from plotstats.core.tick_optimizer import optimize_ticks
from plotstats.stats import x_ticks

from conftest import finite_samples, integer_samples, intervals


@settings(deadline=None)
@given(intervals())
def test_optimize_ticks_ascending(interval):
    # 刻度严格递增，数量受 k_min / k_max 约束
    lo, hi = interval
    ticks = optimize_ticks(lo, hi)
    assert all(a < b for a, b in zip(ticks, ticks[1:]))
    assert 2 <= len(ticks) <= 10


@given(integer_samples())
def test_integral_ticks_idempotent(values):
    # 整数分支：观测值排序去重；把刻度当作输入再求一次结果不变
    aes = AestheticRecord(x=values)
    x_ticks.apply({}, aes)
    assert aes.xtick == sorted({float(v) for v in values})

    again = AestheticRecord(x=aes.xtick)
    x_ticks.apply({}, again)
    assert again.xtick == aes.xtick


@settings(deadline=None)
@given(finite_samples(max_size=50))
def test_ticks_strictly_ascending(values):
    # 任意有限输入都得到严格递增的刻度
    aes = AestheticRecord(x=values)
    x_ticks.apply({}, aes)
    assert all(a < b for a, b in zip(aes.xtick, aes.xtick[1:]))
