"""
Shared Hypothesis strategies for property-based testing across plotstats.
"""
# 说明：属性测试中共享的 Hypothesis 策略集（本目录的测试模块以 from conftest import ... 引用）。
# 职责：
# - 生成有限、量级受控的一维样本，避免极端值导致分箱宽度下溢
# - 生成整数样本，用于刻度统计的整数分支
# - 生成带分组键的箱线图输入

from hypothesis import strategies as st


# ------------------------------------------------------------------ Samples
@st.composite
def finite_samples(draw, min_size=1, max_size=200):
    # 在 [-1e6, 1e6] 内生成有限浮点样本
    return draw(
        st.lists(st.floats(min_value=-1e6,
                           max_value=1e6,
                           allow_nan=False,
                           allow_infinity=False),
                 min_size=min_size,
                 max_size=max_size))


@st.composite
def integer_samples(draw, min_size=1, max_size=50):
    # 整数样本：刻度统计会直接使用排序去重后的观测值
    return draw(
        st.lists(st.integers(min_value=-1000, max_value=1000),
                 min_size=min_size,
                 max_size=max_size))


@st.composite
def intervals(draw):
    # 生成 lo < hi 的数值区间，区间宽度相对量级不会过小
    lo = draw(st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False))
    width = draw(st.floats(min_value=1e-3, max_value=1e6, allow_nan=False, allow_infinity=False))
    return lo, lo + width


# ------------------------------------------------------------------ Boxplot
@st.composite
def grouped_samples(draw, max_groups=4, max_size=60):
    # 生成 (x, y) 行：x 取有限的几个类别，y 为有限浮点
    n = draw(st.integers(min_value=1, max_value=max_size))
    labels = [f"g{i}" for i in range(draw(st.integers(min_value=1, max_value=max_groups)))]
    xs = draw(st.lists(st.sampled_from(labels), min_size=n, max_size=n))
    ys = draw(
        st.lists(st.floats(min_value=-1e4, max_value=1e4, allow_nan=False, allow_infinity=False),
                 min_size=n,
                 max_size=n))
    return xs, ys
