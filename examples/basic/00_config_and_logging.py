"""
Example 00: Runtime Configuration and Logging.

Goal:
    Demonstrate how runtime options are read from the environment, updated
    at runtime, and how statistic loggers summarise bulky payloads.

Usage:
    PLOTSTATS_MAX_BIN_COUNT=40 python examples/basic/00_config_and_logging.py --log-level DEBUG
"""
import logging
import sys
from pathlib import Path

project_root = Path(__file__).resolve().parents[2]
src_root = project_root / "src"
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from examples._shared import cli, io
from plotstats import configure, get_config, get_logger
from plotstats.core.utils import configure_logging, summarize_payload
from plotstats.stats import registered_statistics_snapshot

def main(argv=None):
    args = cli.parse_args("Config and Logging Demo", argv)

    # 1. Load environment overrides (PLOTSTATS_*) into the global config
    config = get_config()
    config.load_from_env()
    if args.log_level:
        configure(log_level=args.log_level)
    configure_logging(config.log_level)
    logger = get_logger("examples.config")

    # 2. Runtime update: tighter fences for the rest of this process
    before = config.fence_coefficient
    configure(fence_coefficient=3.0 if not args.quick else 1.5)

    # 3. Payloads passed via extra={"values": ...} are summarised by PayloadFilter
    values = list(range(50))
    logger.info("demo payload", extra={"values": values})

    result = {
        "name": "basic/00_config_and_logging",
        "config": {
            "log_level": config.log_level,
            "strict_validation": config.strict_validation,
            "max_bin_count": config.max_bin_count,
            "max_bin_count_2d": config.max_bin_count_2d,
        },
        "outputs": {
            "fence_coefficient_before": before,
            "fence_coefficient_after": config.fence_coefficient,
            "payload_summary": summarize_payload(values),
            "registered_statistics": registered_statistics_snapshot(),
        },
        "metrics": {
            "root_level": logging.getLevelName(logging.getLogger().level),
        },
        "artifacts": {}
    }

    configure(fence_coefficient=before)
    out_path = io.write_json(result, Path(args.outdir) / "00_config.json")
    result["artifacts"]["json"] = str(out_path)

    return result

if __name__ == "__main__":
    res = main()
    io.print_summary(res)
