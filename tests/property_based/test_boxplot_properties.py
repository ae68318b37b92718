"""
Property-based tests for the boxplot statistic.
"""
# 说明：BoxplotStatistic 的属性测试。
# 覆盖：
# - 每组满足 lower_fence <= lower_hinge <= middle <= upper_hinge <= upper_fence
# - 离群值严格落在栅栏之外，且都是该组的观测值
# - 组数等于不同 x 的个数，所有逐组通道长度一致

from hypothesis import given

from plotstats.core import AestheticRecord
from plotstats.stats import boxplot

from conftest import finite_samples, grouped_samples


def _le(a, b):
    # 不同插值位置之间允许一个舍入误差量级的偏差
    return a <= b + 1e-12 * max(1.0, abs(a), abs(b))


@given(finite_samples(max_size=100))
def test_summary_ordering(values):
    # 五数概括的顺序关系
    aes = AestheticRecord(y=values)
    boxplot.apply({}, aes)
    chain = [aes.lower_fence[0], aes.lower_hinge[0], aes.middle[0], aes.upper_hinge[0], aes.upper_fence[0]]
    assert all(_le(a, b) for a, b in zip(chain, chain[1:]))
    assert aes.y[0] == aes.middle[0]


@given(finite_samples(max_size=100))
def test_outliers_outside_fences(values):
    # 离群值全部严格在栅栏之外；栅栏内的值不会被标记为离群
    aes = AestheticRecord(y=values)
    boxplot.apply({}, aes)
    lo, hi = aes.lower_fence[0], aes.upper_fence[0]
    outliers = aes.outliers[0].tolist()
    assert all(v < lo or v > hi for v in outliers)
    assert sorted(outliers) == sorted(v for v in values if v < lo or v > hi)


@given(grouped_samples())
def test_groups_share_order(sample):
    # 组数等于不同 x 值的个数，组顺序为首次出现顺序
    xs, ys = sample
    aes = AestheticRecord(x=xs, y=ys)
    boxplot.apply({}, aes)
    expected = list(dict.fromkeys(xs))
    assert aes.x == expected
    for name in ("middle", "lower_hinge", "upper_hinge", "lower_fence", "upper_fence", "y"):
        assert len(aes.get(name)) == len(expected)
    assert len(aes.outliers) == len(expected)
