"""
Runtime configuration for the statistics layer.

Holds the tunable options read by the statistics (bin-count ceilings,
boxplot fence coefficient, tick density targets) together with validation
strictness and logging settings. Values can come from ``PLOTSTATS_*``
environment variables or be changed at runtime with ``configure``.
"""
# 说明：统计层的运行时配置，集中管理可调选项，支持环境变量覆写与运行期更新。
# 职责：
# - RuntimeConfig：严格校验开关、日志等级、日志载荷摘要、分箱上限、栅栏系数、刻度密度等配置项
# - load_from_env(...)：按前缀（默认 PLOTSTATS_）读取环境变量，并按字段类型解析
# - validate()：更新后检查取值范围（分箱上限与刻度数为正整数，栅栏系数非负）
# - get_config() / configure(...)：访问与更新进程级单例
# 约定：
# - 布尔环境变量 {"1", "true", "yes", "on"}（大小写不敏感）为 True
# - 未知配置键触发 AttributeError；取值越界触发 ParamValidationError

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from typing import Any, Callable, Dict

from .param_validation import ParamValidationError

_TRUTHY = {"1", "true", "yes", "on"}
_POSITIVE_INT_FIELDS = ("max_bin_count", "max_bin_count_2d", "tick_target_count", "tick_min_count", "tick_max_count")


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() in _TRUTHY


# 字段类型 -> 环境变量字符串解析函数；extra 不从环境变量读取
_PARSERS: Dict[str, Callable[[str], Any]] = {
    "bool": _parse_bool,
    "int": int,
    "float": float,
    "str": str,
}


@dataclass
class RuntimeConfig:
    """
    Process-wide options read by statistics at call time.

    - Configuration
      - strict_validation: Non-finite sample values raise instead of being dropped.
      - log_level / summarize_log_payloads: Logging behaviour.
      - max_bin_count / max_bin_count_2d: Candidate ceilings for bin-count search.
      - fence_coefficient: Tukey fence multiplier for boxplots.
      - tick_target_count / tick_min_count / tick_max_count: Tick optimizer density.
    """

    strict_validation: bool = True
    log_level: str = field(default_factory=lambda: os.environ.get("PLOTSTATS_LOG_LEVEL", "INFO"))
    summarize_log_payloads: bool = True
    max_bin_count: int = 150
    max_bin_count_2d: int = 50
    fence_coefficient: float = 1.5
    tick_target_count: int = 5
    tick_min_count: int = 2
    tick_max_count: int = 10
    extra: Dict[str, Any] = field(default_factory=dict)

    def validate(self) -> None:
        for name in _POSITIVE_INT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ParamValidationError(f"{name} must be a positive integer, got {value!r}")
        if self.tick_min_count > self.tick_max_count:
            raise ParamValidationError("tick_min_count must not exceed tick_max_count")
        if not float(self.fence_coefficient) >= 0:
            raise ParamValidationError(f"fence_coefficient must be non-negative, got {self.fence_coefficient!r}")

    def update(self, **kwargs: Any) -> None:
        # 先整体校验再提交：任何一个键非法时配置保持原样
        for key in kwargs:
            if key not in self.__dataclass_fields__:
                raise AttributeError(f"unknown config option '{key}'")
        previous = {key: getattr(self, key) for key in kwargs}
        for key, value in kwargs.items():
            setattr(self, key, value)
        try:
            self.validate()
        except ParamValidationError:
            for key, value in previous.items():
                setattr(self, key, value)
            raise

    def load_from_env(self, prefix: str = "PLOTSTATS_") -> None:
        values: Dict[str, Any] = {}
        for f in fields(self):
            parser = _PARSERS.get(f.type if isinstance(f.type, str) else getattr(f.type, "__name__", ""))
            env_key = f"{prefix}{f.name.upper()}"
            if parser is None or env_key not in os.environ:
                continue
            values[f.name] = parser(os.environ[env_key])
        self.update(**values)


_GLOBAL_CONFIG = RuntimeConfig()


def get_config() -> RuntimeConfig:
    return _GLOBAL_CONFIG


def configure(**kwargs: Any) -> RuntimeConfig:
    """Update the process-wide configuration and return it."""
    _GLOBAL_CONFIG.update(**kwargs)
    return _GLOBAL_CONFIG
