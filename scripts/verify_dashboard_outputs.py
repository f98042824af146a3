import argparse
import subprocess
import sys
from pathlib import Path
import difflib

ROOT = Path(__file__).resolve().parents[1]
GOLDEN = ROOT / "tests" / "golden"

# Fully in the past relative to AT: every value is seeded and reproducible
AT = "2025-03-10T09:00"
DAY = "2025-03-03"
WEEK_START = "2025-03-02"

CHECKS = {
    "day_activity_center.txt": (
        f"{sys.executable} -m gym_traffic.cli.dashboard "
        f"--view day --facility activity-center --date {DAY} --at {AT}"
    ),
    "week_rec_center_west.txt": (
        f"{sys.executable} -m gym_traffic.cli.dashboard "
        f"--view week --facility rec-center-west --week-start {WEEK_START} --at {AT}"
    ),
}


def run_command(cmd: str) -> str:
    result = subprocess.run(
        cmd,
        shell=True,
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        print(result.stderr)
        sys.exit(result.returncode)
    return result.stdout


def diff(name: str, expected: str, actual: str) -> bool:
    if expected == actual:
        print(f"OK       {name}")
        return True

    print(f"CHANGED  {name}")
    for line in difflib.unified_diff(
        expected.splitlines(),
        actual.splitlines(),
        fromfile=f"golden/{name}",
        tofile="current",
        lineterm="",
    ):
        print(line)
    return False


def main():
    parser = argparse.ArgumentParser(
        description="Compare historical dashboard output against golden files"
    )
    parser.add_argument(
        "--update",
        action="store_true",
        help="Rewrite golden files from the current output",
    )
    args = parser.parse_args()

    GOLDEN.mkdir(parents=True, exist_ok=True)
    ok = True

    for name, cmd in CHECKS.items():
        actual = run_command(cmd)
        golden_file = GOLDEN / name

        if args.update or not golden_file.exists():
            golden_file.write_text(actual)
            print(f"WROTE    {name}")
            continue

        ok = diff(name, golden_file.read_text(), actual) and ok

    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
