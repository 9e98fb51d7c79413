#!/usr/bin/env python3
"""
Run the initials CI checks from a local checkout.

Steps, in order, each stopping the run on failure:
  format     black --check (line length 120) over the package, tests and scripts
  types      mypy over the package
  tests      pytest with coverage of the package and a minimum coverage floor
  benchmark  python -m initials.initials, to make sure the throughput check still runs

Tools come from the dev extra (`pip install -e .[dev]`). Pass step names to run a subset:

    python scripts/run_ci_locally.py tests benchmark
"""

import os
import sys
import subprocess
from pathlib import Path

PACKAGE = "initials"
COVERAGE_FLOOR = 80
LINE_LENGTH = "120"

ROOT = Path(__file__).resolve().parent.parent


def _python(*args: str) -> list[str]:
    return [sys.executable, "-m", *args]


STEPS = {
    "format": _python("black", PACKAGE, "tests", "scripts", "--check", "--line-length", LINE_LENGTH),
    "types": _python("mypy", PACKAGE, "--ignore-missing-imports"),
    "tests": _python(
        "pytest",
        "tests/",
        f"--cov={PACKAGE}",
        "--cov-report=term-missing",
        f"--cov-fail-under={COVERAGE_FLOOR}",
    ),
    "benchmark": _python(f"{PACKAGE}.initials"),
}


def run_step(name: str) -> None:
    cmd = STEPS[name]
    env = dict(os.environ, PYTHONPATH=str(ROOT))
    print(f"[{name}] {' '.join(cmd)}")
    subprocess.run(cmd, check=True, cwd=str(ROOT), env=env)


def main(argv: list[str]) -> int:
    selected = argv or list(STEPS)
    unknown = [name for name in selected if name not in STEPS]
    if unknown:
        print(f"Unknown step(s): {', '.join(unknown)}. Choose from: {', '.join(STEPS)}", file=sys.stderr)
        return 2

    for name in selected:
        try:
            run_step(name)
        except subprocess.CalledProcessError as e:
            print(f"\n[{name}] failed with exit code {e.returncode}", file=sys.stderr)
            return e.returncode

    print(f"\n{len(selected)} step(s) passed")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
