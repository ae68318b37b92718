"""Entry point for the core library components."""

from __future__ import annotations

from .aesthetics import (
    LABEL_FIELDS,
    AestheticRecord,
    format_label,
)
from .exceptions import (
    IncompatibleScaleError,
    InvalidSampleError,
    MissingAestheticError,
    MissingScaleError,
    StatisticError,
)
from .utils import (
    ParamValidationError,
    RuntimeConfig,
    configure,
    get_config,
    get_logger,
)

__all__ = [
    "LABEL_FIELDS",
    "AestheticRecord",
    "format_label",
    "IncompatibleScaleError",
    "InvalidSampleError",
    "MissingAestheticError",
    "MissingScaleError",
    "StatisticError",
    "ParamValidationError",
    "RuntimeConfig",
    "configure",
    "get_config",
    "get_logger",
]
