"""
plotstats: statistical transforms for a grammar-of-graphics plotting layer.

Statistics (histogram, rectangular binning, boxplot, ticks) rewrite a shared
``AestheticRecord`` in place before geometry rendering. Color scales turn
derived values into colors and legend entries.
"""

from .core import (
    AestheticRecord,
    IncompatibleScaleError,
    InvalidSampleError,
    MissingAestheticError,
    MissingScaleError,
    ParamValidationError,
    RuntimeConfig,
    StatisticError,
    configure,
    format_label,
    get_config,
    get_logger,
)
from .core.tick_optimizer import optimize_ticks
from .scales import ContinuousColorScale, DiscreteColorScale, color_gradient, color_hue
from .stats import (
    StatisticElement,
    StatisticType,
    TickStatistic,
    apply_statistics,
    boxplot,
    get_statistic,
    histogram,
    identity,
    nil,
    rectbin,
    x_ticks,
    y_ticks,
)

__version__ = "0.1.0"

__all__ = [
    "AestheticRecord",
    "IncompatibleScaleError",
    "InvalidSampleError",
    "MissingAestheticError",
    "MissingScaleError",
    "ParamValidationError",
    "RuntimeConfig",
    "StatisticError",
    "configure",
    "format_label",
    "get_config",
    "get_logger",
    "optimize_ticks",
    "ContinuousColorScale",
    "DiscreteColorScale",
    "color_gradient",
    "color_hue",
    "StatisticElement",
    "StatisticType",
    "TickStatistic",
    "apply_statistics",
    "boxplot",
    "get_statistic",
    "histogram",
    "identity",
    "nil",
    "rectbin",
    "x_ticks",
    "y_ticks",
]
