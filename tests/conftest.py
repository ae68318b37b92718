"""Shared pytest configuration and path setup for test modules."""

import dataclasses
import sys
from pathlib import Path

import pytest

# Ensure repo root and src/ are on sys.path for all tests
_ROOT = Path(__file__).resolve().parents[1]
_SRC = _ROOT / "src"
for p in (str(_ROOT), str(_SRC)):
    if p not in sys.path:
        sys.path.insert(0, p)

from plotstats.core.utils.config import get_config  # noqa: E402


@pytest.fixture(autouse=True)
def restore_runtime_config():
    # 全局 RuntimeConfig 是进程级单例：每个测试结束后恢复为进入测试前的字段值
    config = get_config()
    snapshot = {f.name: getattr(config, f.name) for f in dataclasses.fields(config)}
    snapshot["extra"] = dict(config.extra)
    yield config
    for name, value in snapshot.items():
        setattr(config, name, value)
