#!/usr/bin/env python3
"""
Run the harvester quality checks: tests, linting, formatting, and type checking.

Pass ``--fast`` to run only the unit tests and skip the type checker.
"""

import argparse
import subprocess
import sys
from pathlib import Path
from typing import List, Optional, Tuple

PROJECT_ROOT = Path(__file__).parent.parent
PACKAGES = "adapters application domain infrastructure main.py"


def run_command(cmd: str, description: str, cwd: Optional[Path] = None) -> bool:
    """Run a command and return True if it exited with status 0."""
    print(f"\n🔍 {description}...")
    print(f"Running: {cmd}")

    try:
        result = subprocess.run(
            cmd,
            shell=True,
            cwd=cwd or PROJECT_ROOT,
            capture_output=True,
            text=True,
        )
    except OSError as e:
        print(f"❌ {description} could not start: {e}")
        return False

    if result.returncode != 0:
        print(f"❌ {description} failed:")
        if result.stdout:
            print("STDOUT:", result.stdout)
        if result.stderr:
            print("STDERR:", result.stderr)
        return False

    print(f"✅ {description} passed")
    return True


def build_checks(fast: bool) -> List[Tuple[str, str]]:
    if fast:
        return [
            ("uv run pytest -m unit -q", "Running unit tests"),
            ("uv run ruff check .", "Running linting"),
        ]
    return [
        ("uv run pytest --cov --cov-report=term-missing", "Running tests with coverage"),
        ("uv run ruff check .", "Running linting"),
        ("uv run ruff format --check .", "Checking formatting"),
        (f"uv run mypy {PACKAGES}", "Running type checking"),
    ]


def main() -> None:
    parser = argparse.ArgumentParser(description="Run harvester quality checks")
    parser.add_argument(
        "--fast", action="store_true", help="Unit tests and linting only"
    )
    args = parser.parse_args()

    print("🚀 Running faostat-harvester quality checks...")

    failed = [
        desc
        for cmd, desc in build_checks(args.fast)
        if not run_command(cmd, desc, cwd=PROJECT_ROOT)
    ]

    if failed:
        print(f"\n💥 {len(failed)} check(s) failed: {', '.join(failed)}")
        sys.exit(1)

    print("\n🎉 All checks passed! ✨")
    sys.exit(0)


if __name__ == "__main__":
    main()
