"""
Result output helpers for the example scripts.
"""
import json
from pathlib import Path
from typing import Any, Dict, Union

import numpy as np

_SECTIONS = ("config", "metrics", "artifacts")

def to_jsonable(value: Any) -> Any:
    """Convert numpy arrays and scalars (possibly nested) into plain Python values."""
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, dict):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return value

def write_json(data: Dict[str, Any], path: Union[str, Path]) -> Path:
    """Write ``data`` as indented JSON, creating parent directories."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(to_jsonable(data), indent=2, default=str), encoding="utf-8")
    return target

def print_summary(result: Dict[str, Any]) -> None:
    """Print the name and the config / metrics / artifacts sections of a result."""
    rule = "=" * 60
    print(rule)
    print(f"EXAMPLE: {result.get('name', 'Unknown')}")
    for section in _SECTIONS:
        entries = result.get(section)
        if not entries:
            continue
        print("-" * 60)
        print(f"{section.capitalize()}:")
        for key, value in entries.items():
            print(f"  {key}: {value}")
    print(rule)
