"""
Example 01: Histogram with Automatic Bin Count.

Goal:
    Bin a bimodal sample with the histogram statistic and place x ticks
    over the result.

Usage:
    python examples/basic/01_histogram.py --seed 7 --quick
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
from plotstats import AestheticRecord, apply_statistics

def main(argv=None):
    args = cli.parse_args("Histogram Demo", argv)
    generator = rng.make_rng(args.seed)

    n = 200 if args.quick else 2000
    sample = toy_data.build_mixture_sample(n, centers=(0.0, 6.0), rng=generator)

    # 1. Histogram: x -> (x_min, x_max, y)
    aes = AestheticRecord(x=sample)
    apply_statistics(["histogram"], None, aes)
    bin_count = len(aes.y)

    # 2. Ticks for the binned axis, computed on the bin edges
    ticks = AestheticRecord(x=list(aes.x_min) + [aes.x_max[-1]])
    apply_statistics(["x_ticks"], None, ticks)

    result = {
        "name": "basic/01_histogram",
        "config": {
            "seed": args.seed,
            "quick": args.quick,
            "n": n
        },
        "outputs": {
            "x_min": aes.x_min,
            "x_max": aes.x_max,
            "counts": aes.y,
            "xtick": ticks.xtick,
            "xtick_labels": [ticks.xtick_label(t) for t in ticks.xtick],
        },
        "metrics": {
            "bin_count": bin_count,
            "total": float(sum(aes.y)),
            "bin_width": float(aes.x_max[0] - aes.x_min[0]),
        },
        "artifacts": {}
    }

    out_path = io.write_json(result, Path(args.outdir) / "01_histogram.json")
    result["artifacts"]["json"] = str(out_path)

    return result

if __name__ == "__main__":
    res = main()
    io.print_summary(res)
