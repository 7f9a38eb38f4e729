#!/usr/bin/env python3
"""
Format (or check formatting of) Telegrapher sources with black.

Usage:
    ./scripts/format_python.py          # reformat files in place
    ./scripts/format_python.py --check  # only report, exit 1 if something would change
"""

import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
# Black settings (line length etc.) are taken from pyproject.toml
SOURCE_PATHS = ["lib", "internal", "tests", "scripts", "main.py"]


def collectPaths(rootDir: Path) -> list[str]:
    """Return existing source paths relative to project root."""
    return [path for path in SOURCE_PATHS if (rootDir / path).exists()]


def runBlack(paths: list[str], checkOnly: bool) -> int:
    cmd = [sys.executable, "-m", "black"]
    if checkOnly:
        cmd += ["--check", "--diff"]
    cmd += paths

    try:
        result = subprocess.run(cmd, cwd=PROJECT_ROOT)
    except FileNotFoundError:
        print("Error: can't run black. Install dev dependencies with 'pip install -e .[dev]'.")
        return 1
    return result.returncode


def main() -> int:
    checkOnly = "--check" in sys.argv[1:]
    paths = collectPaths(PROJECT_ROOT)
    if not paths:
        print("Nothing to format.")
        return 0

    print(f"{'Checking' if checkOnly else 'Formatting'}: {', '.join(paths)}")
    return runBlack(paths, checkOnly)


if __name__ == "__main__":
    sys.exit(main())
