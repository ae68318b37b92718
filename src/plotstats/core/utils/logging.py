"""
Lightweight logging helpers with payload-aware defaults.
"""
# 说明：轻量级日志工具，提供统一的 logger 获取入口，并避免把整列样本数据写入日志。
# 职责：
# - PayloadFilter：根据运行时配置，将通过 extra={"values": ...} 附带的长序列替换为简短摘要
# - configure_logging(...)：初始化 logging 基本配置并为根 logger 挂载载荷过滤器
# - get_logger(...)：按名称获取 logger，必要时自动完成日志系统初始化
# 约定：
# - 是否摘要化载荷由 RuntimeConfig.summarize_log_payloads 控制
# - 日志级别优先级：显式参数 level > 环境变量 PLOTSTATS_LOG_LEVEL > 运行时配置的 log_level

from __future__ import annotations

import logging
import os
from typing import Any, Optional

from .config import get_config

_PAYLOAD_ATTRS = ("values", "counts")
_PREVIEW_ITEMS = 5


def summarize_payload(value: Any) -> str:
    # 将序列载荷压缩为“长度 + 前若干项”的摘要字符串；标量直接转为字符串
    if isinstance(value, (str, bytes)) or not hasattr(value, "__len__"):
        return str(value)
    items = list(value)
    head = ", ".join(str(item) for item in items[:_PREVIEW_ITEMS])
    suffix = ", ..." if len(items) > _PREVIEW_ITEMS else ""
    return f"<{len(items)} items: [{head}{suffix}]>"


class PayloadFilter(logging.Filter):
    """Filter that replaces bulky sequence payloads with short summaries if configured."""
    # 日志载荷过滤器：在启用摘要配置时，对约定字段名（values / counts）统一做摘要处理

    def filter(self, record: logging.LogRecord) -> bool:
        config = get_config()
        if not config.summarize_log_payloads:
            return True
        for attr in _PAYLOAD_ATTRS:
            if hasattr(record, attr):
                setattr(record, attr, summarize_payload(getattr(record, attr)))
        return True


def configure_logging(level: Optional[str] = None) -> None:
    # 初始化根 logger：确定最终日志级别、设置格式，并挂载 PayloadFilter
    log_level = level or os.environ.get("PLOTSTATS_LOG_LEVEL", get_config().log_level)
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(name)s %(asctime)s | %(message)s",
    )
    root = logging.getLogger()
    if not any(isinstance(existing, PayloadFilter) for existing in root.filters):
        root.addFilter(PayloadFilter())


def get_logger(name: str) -> logging.Logger:
    # 获取指定名称的 logger，若尚无 handler，则懒加载方式调用 configure_logging 进行初始化
    logger = logging.getLogger(name)
    if not logger.handlers:
        configure_logging()
    if not any(isinstance(existing, PayloadFilter) for existing in logger.filters):
        logger.addFilter(PayloadFilter())
    return logger
