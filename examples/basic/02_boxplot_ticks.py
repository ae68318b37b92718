"""
Example 02: Grouped Boxplot and Y Ticks.

Goal:
    Summarise three groups with the boxplot statistic, then place y ticks
    covering medians, hinges and fences.

Usage:
    python examples/basic/02_boxplot_ticks.py --seed 3
"""
import sys
from pathlib import Path

project_root = Path(__file__).resolve().parents[2]
src_root = project_root / "src"
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from examples._shared import cli, io, rng, toy_data
from plotstats import AestheticRecord, apply_statistics, boxplot, y_ticks

def main(argv=None):
    args = cli.parse_args("Boxplot Demo", argv)
    generator = rng.make_rng(args.seed)

    n = 90 if args.quick else 900
    labels, values = toy_data.build_grouped_sample(n, ["control", "low", "high"], rng=generator)

    aes = AestheticRecord(x=labels, y=values)
    apply_statistics([boxplot, y_ticks], None, aes)

    groups = {
        str(key): {
            "lower_fence": aes.lower_fence[i],
            "lower_hinge": aes.lower_hinge[i],
            "middle": aes.middle[i],
            "upper_hinge": aes.upper_hinge[i],
            "upper_fence": aes.upper_fence[i],
            "outliers": aes.outliers[i],
        }
        for i, key in enumerate(aes.x)
    }

    result = {
        "name": "basic/02_boxplot_ticks",
        "config": {
            "seed": args.seed,
            "quick": args.quick,
            "n": n
        },
        "outputs": {
            "groups": groups,
            "ytick": aes.ytick,
        },
        "metrics": {
            "group_count": len(aes.x),
            "outlier_count": int(sum(len(o) for o in aes.outliers)),
            "tick_count": len(aes.ytick),
        },
        "artifacts": {}
    }

    out_path = io.write_json(result, Path(args.outdir) / "02_boxplot.json")
    result["artifacts"]["json"] = str(out_path)

    return result

if __name__ == "__main__":
    res = main()
    io.print_summary(res)
