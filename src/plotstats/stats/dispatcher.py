"""
Apply an ordered list of statistics to one aesthetic record.

Responsibilities
  - Resolve identifiers through the statistic registry.
  - Run statistics strictly in list order, each seeing the previous one's output.
  - Time every application and report it at DEBUG level.

Limitations
  - Errors propagate unchanged; statistics applied before the failing one
    keep their effects on the record.
"""
# 说明：统计分发器，按顺序把一组统计变换作用到同一条 AestheticRecord 上。
# 职责：
# - 通过注册表把字符串 / 枚举标识解析为统计单例，实例直接透传
# - 逐个调用 apply(scales, aes)，用 Timer 计时并记录 DEBUG 日志
# 约定：
# - 不捕获任何异常；失败时已执行的统计结果保留在记录中
# - 返回 None，所有结果通过原地修改体现

from __future__ import annotations

from typing import Iterable, Mapping, Optional

from plotstats.core.aesthetics import AestheticRecord
from plotstats.core.utils.logging import get_logger
from plotstats.core.utils.param_validation import ensure_type
from plotstats.core.utils.performance import Timer
from plotstats.scales.base import ScaleElement

from .statistic_registry import StatisticIdentifier, get_statistic

logger = get_logger(__name__)


def apply_statistics(
    stats: Iterable[StatisticIdentifier],
    scales: Optional[Mapping[str, ScaleElement]],
    aes: AestheticRecord,
) -> None:
    """Apply ``stats`` to ``aes`` in order."""
    ensure_type(aes, (AestheticRecord,), label="aes")
    if isinstance(stats, (str, bytes)):
        # 单个字符串视为一个统计标识，而不是逐字符迭代
        stats = [stats]
    scales = {} if scales is None else scales

    resolved = [get_statistic(stat) for stat in stats]
    for stat in resolved:
        with Timer(f"applied {stat.name}", logger=logger):
            stat.apply(scales, aes)
