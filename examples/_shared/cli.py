"""
Shared CLI flags for the example scripts.
"""
import argparse
from typing import List, Optional

from plotstats import configure

def build_parser(description: str) -> argparse.ArgumentParser:
    """Parser with the flags every example accepts."""
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--seed", type=int, default=0, help="Seed for the generated sample data (default: 0)")
    parser.add_argument("--quick", action="store_true", help="Use small samples")
    parser.add_argument("--outdir", default="./_outputs", help="Where the JSON result is written (default: ./_outputs)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override PLOTSTATS_LOG_LEVEL for this run",
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Drop non-finite values with a warning instead of failing",
    )
    return parser

def parse_args(description: str, argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse ``argv`` (defaults to sys.argv) and apply runtime options."""
    args = build_parser(description).parse_args(argv)
    if args.lenient:
        configure(strict_validation=False)
    return args
