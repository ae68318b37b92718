"""
Argument checks shared by statistics, scales and the tick optimizer.
"""
# 说明：统计层内部统一使用的轻量参数校验工具。
# 职责：
# - ParamValidationError：参数不合法时抛出，继承 ValueError
# - ensure / ensure_type：条件断言与类型断言
# - positive_int / finite_real：可直接放入 schema 的校验 + 转换函数
# - validate_arguments：按 schema 在调用前校验并转换参数（位置参数、关键字参数、仅限关键字参数均适用）

from __future__ import annotations

import functools
import inspect
import math
import numbers
from typing import Any, Callable, Mapping, Tuple, Type


class ParamValidationError(ValueError):
    """Raised when an argument fails validation."""


def ensure(condition: bool, message: str, *, error: Type[Exception] = ParamValidationError) -> None:
    if not condition:
        raise error(message)


def ensure_type(value: Any, expected: Tuple[type, ...], *, label: str = "value") -> None:
    # 失败消息带上字段标签与全部可接受的类型名
    if isinstance(value, expected):
        return
    names = ", ".join(t.__name__ for t in expected)
    raise ParamValidationError(f"{label} must be instance of {names}, got {type(value).__name__}")


def positive_int(value: Any) -> int:
    """Coerce ``value`` to a strictly positive int."""
    # 布尔值虽是 Integral 的子类，但作为计数参数没有意义，这里显式拒绝
    ensure(
        isinstance(value, numbers.Integral) and not isinstance(value, bool),
        f"expected a positive integer, got {value!r}",
    )
    ensure(int(value) > 0, f"expected a positive integer, got {value!r}")
    return int(value)


def finite_real(value: Any) -> float:
    """Coerce ``value`` to a finite float."""
    ensure(
        isinstance(value, numbers.Real) and not isinstance(value, bool),
        f"expected a real number, got {value!r}",
    )
    numeric = float(value)
    ensure(math.isfinite(numeric), f"expected a finite number, got {value!r}")
    return numeric


def validate_arguments(schema: Mapping[str, Callable[[Any], Any]]) -> Callable:
    """
    Decorator running ``schema[name](value)`` on each named argument before the call.

    Validators return the (possibly converted) value or raise
    ParamValidationError. Arguments left at their defaults are not validated.
    """

    def decorator(func: Callable) -> Callable:
        signature = inspect.signature(func)
        unknown = set(schema) - set(signature.parameters)
        if unknown:
            raise TypeError(f"{func.__name__} has no parameter(s) {sorted(unknown)}")

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            bound = signature.bind(*args, **kwargs)
            for name, validator in schema.items():
                if name in bound.arguments:
                    bound.arguments[name] = validator(bound.arguments[name])
            return func(*bound.args, **bound.kwargs)

        return wrapper

    return decorator
