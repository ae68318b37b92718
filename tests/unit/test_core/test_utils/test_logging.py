"""
Unit tests for logging utilities.
"""
# 说明：日志配置与载荷摘要过滤相关的单元测试。
# 覆盖：
# - summarize_payload(...)：长序列压缩为“长度 + 前几项”摘要，标量原样转字符串
# - configure_logging(...) / get_logger(...)：logger 挂载 PayloadFilter
# - summarize_log_payloads 关闭时载荷保持原样

import logging

from plotstats.core.utils import configure, configure_logging, get_logger, summarize_payload
from plotstats.core.utils.logging import PayloadFilter


def test_summarize_payload_truncates_long_sequences() -> None:
    # 超过 5 项的序列只保留前 5 项并标注总长度
    assert summarize_payload(list(range(8))) == "<8 items: [0, 1, 2, 3, 4, ...]>"
    assert summarize_payload([1, 2]) == "<2 items: [1, 2]>"


def test_summarize_payload_keeps_scalars_and_strings() -> None:
    # 字符串与标量不按序列处理
    assert summarize_payload("abc") == "abc"
    assert summarize_payload(3.5) == "3.5"


def test_get_logger_attaches_payload_filter() -> None:
    # get_logger 返回的 logger 必须挂载 PayloadFilter，且重复获取不重复挂载
    configure_logging(level="INFO")
    logger = get_logger("plotstats.test")
    get_logger("plotstats.test")
    filters = [f for f in logger.filters if isinstance(f, PayloadFilter)]
    assert len(filters) == 1


def test_payload_filter_summarizes_values(caplog) -> None:
    # 通过 extra={"values": ...} 附带的长序列在日志记录中被替换为摘要
    logger = get_logger("plotstats.test.payload")
    with caplog.at_level(logging.INFO, logger="plotstats.test.payload"):
        logger.info("binned", extra={"values": list(range(100))})
    record = caplog.records[-1]
    assert record.values == "<100 items: [0, 1, 2, 3, 4, ...]>"
    assert "binned" in caplog.text


def test_payload_filter_respects_config(caplog) -> None:
    # 关闭 summarize_log_payloads 后，载荷保持原始对象
    configure(summarize_log_payloads=False)
    logger = get_logger("plotstats.test.raw")
    payload = [1, 2, 3, 4, 5, 6, 7]
    with caplog.at_level(logging.INFO, logger="plotstats.test.raw"):
        logger.info("raw", extra={"counts": payload})
    assert caplog.records[-1].counts == payload
