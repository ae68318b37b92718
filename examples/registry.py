"""
Registry of available examples.
"""
from typing import List, TypedDict

class ExampleMetadata(TypedDict):
    path: str
    tags: List[str]
    experimental: bool
    description: str

EXAMPLES: List[ExampleMetadata] = [
    {
        "path": "basic/00_config_and_logging.py",
        "tags": ["basic", "p0"],
        "experimental": False,
        "description": "Runtime configuration, environment overrides and payload-summarising loggers."
    },
    {
        "path": "basic/01_histogram.py",
        "tags": ["basic", "stats", "p0"],
        "experimental": False,
        "description": "Histogram with automatic bin count and x ticks over the bin edges."
    },
    {
        "path": "basic/02_boxplot_ticks.py",
        "tags": ["basic", "stats", "p0"],
        "experimental": False,
        "description": "Grouped boxplot followed by y ticks over medians, hinges and fences."
    },
    {
        "path": "basic/03_rectbin.py",
        "tags": ["basic", "stats", "scales"],
        "experimental": False,
        "description": "2D rectangular binning colored through a continuous gradient."
    },
]
