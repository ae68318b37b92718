"""
Run every registered example in a subprocess and report pass / fail.
"""
import argparse
import subprocess
import sys
from pathlib import Path
from typing import List, Optional, Tuple

# Add project root to sys.path
sys.path.append(str(Path(__file__).resolve().parent.parent))

from examples.registry import EXAMPLES, ExampleMetadata

_HERE = Path(__file__).parent

def select(entries: List[ExampleMetadata], tags: set, include_experimental: bool) -> Tuple[list, list]:
    """Split registry entries into (selected, skipped-with-reason)."""
    selected, skipped = [], []
    for entry in entries:
        if entry["experimental"] and not include_experimental:
            skipped.append((entry["path"], "experimental"))
        elif tags and not tags.intersection(entry["tags"]):
            skipped.append((entry["path"], "tag mismatch"))
        else:
            selected.append(entry)
    return selected, skipped

def run_one(entry: ExampleMetadata, args: argparse.Namespace) -> Optional[str]:
    """Run one example; return a failure reason or None on success."""
    script = _HERE / entry["path"]
    if not script.exists():
        return "file not found"
    cmd = [sys.executable, str(script), "--seed", str(args.seed), "--outdir", args.outdir]
    if args.quick:
        cmd.append("--quick")
    # 子进程隔离全局配置与日志状态
    proc = subprocess.run(cmd, capture_output=True, text=True)
    if proc.returncode != 0:
        return f"exit code {proc.returncode}\n{proc.stderr}"
    return None

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Run plotstats examples.")
    parser.add_argument("--quick", action="store_true", help="Run examples in quick mode")
    parser.add_argument("--seed", type=int, default=0, help="Seed passed to every example")
    parser.add_argument("--outdir", default="./_outputs", help="Output directory base")
    parser.add_argument("--include-tags", help="Comma-separated tags to include (e.g. 'p0,stats')")
    parser.add_argument("--include-experimental", action="store_true", help="Also run experimental examples")
    parser.add_argument("--fail-fast", action="store_true", help="Stop on first failure")
    args = parser.parse_args(argv)

    tags = set(args.include_tags.split(",")) if args.include_tags else set()
    selected, skipped = select(EXAMPLES, tags, args.include_experimental)

    failures = []
    for entry in selected:
        reason = run_one(entry, args)
        status = "PASS" if reason is None else "FAIL"
        print(f"[{status}] {entry['path']}")
        if reason is not None:
            print(f"  {reason}")
            failures.append(entry["path"])
            if args.fail_fast:
                break

    print("-" * 60)
    print(f"Summary: {len(selected) - len(failures)} run ok, {len(failures)} failed, {len(skipped)} skipped")
    return 1 if failures else 0

if __name__ == "__main__":
    sys.exit(main())
