"""Statistics that rewrite an aesthetic record before rendering."""

from .base import ScaleMap, StatisticElement
from .basic import IdentityStatistic, NilStatistic, identity, nil
from .bincount import bin_edges, choose_bin_count_1d, choose_bin_count_2d
from .boxplot import BoxplotStatistic, GroupKey, boxplot
from .dispatcher import apply_statistics
from .histogram import HistogramStatistic, histogram
from .rectbin import RectangularBinStatistic, rectbin
from .statistic_registry import (
    STATISTIC_REGISTRY,
    StatisticType,
    get_statistic,
    normalize_statistic,
    registered_statistics_snapshot,
)
from .ticks import TickStatistic, x_ticks, y_ticks

__all__ = [
    "ScaleMap",
    "StatisticElement",
    "IdentityStatistic",
    "NilStatistic",
    "identity",
    "nil",
    "bin_edges",
    "choose_bin_count_1d",
    "choose_bin_count_2d",
    "BoxplotStatistic",
    "GroupKey",
    "boxplot",
    "apply_statistics",
    "HistogramStatistic",
    "histogram",
    "RectangularBinStatistic",
    "rectbin",
    "STATISTIC_REGISTRY",
    "StatisticType",
    "get_statistic",
    "normalize_statistic",
    "registered_statistics_snapshot",
    "TickStatistic",
    "x_ticks",
    "y_ticks",
]
