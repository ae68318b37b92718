"""Shared utility helpers used across the statistics layer."""

from .math_utils import (
    as_float_array,
    finite_mask,
    quantiles,
    is_integral,
)
from .config import (
    RuntimeConfig,
    get_config,
    configure,
)
from .logging import (
    get_logger,
    configure_logging,
    summarize_payload,
)
from .param_validation import (
    ensure,
    ensure_type,
    finite_real,
    positive_int,
    validate_arguments,
    ParamValidationError,
)
from .performance import (
    Timer,
    time_call,
)

__all__ = [
    "as_float_array",
    "finite_mask",
    "quantiles",
    "is_integral",
    "RuntimeConfig",
    "get_config",
    "configure",
    "get_logger",
    "configure_logging",
    "summarize_payload",
    "ensure",
    "ensure_type",
    "finite_real",
    "positive_int",
    "validate_arguments",
    "ParamValidationError",
    "Timer",
    "time_call",
]
