#!/usr/bin/env python3
"""
Run ruff and mypy over the command executor sources and tests.
Usage:
  python lint.py check    - Report lint problems
  python lint.py fix      - Apply ruff's automatic fixes
  python lint.py format   - Reformat with ruff
  python lint.py mypy     - Type check src/ and tests/
  python lint.py all      - check, then format, then mypy
"""

import os
import subprocess
import sys

STEPS = {
    "check": ["ruff", "check"],
    "fix": ["ruff", "check", "--fix"],
    "format": ["ruff", "format"],
    "mypy": [sys.executable, "-m", "mypy", "src/command_executor", "tests"],
}


def run_command(cmd, env=None):
    """Run a command and return the exit code."""
    print(f"Running: {' '.join(cmd)}")
    return subprocess.run(cmd, env=env).returncode


def main():
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)

    command = sys.argv[1]
    env = os.environ.copy()
    env["PYTHONPATH"] = "src"

    if command == "all":
        exit_code = 0
        for step in ("check", "format", "mypy"):
            exit_code = run_command(STEPS[step], env=env)
            if exit_code != 0:
                break
    elif command in STEPS:
        exit_code = run_command(STEPS[command], env=env)
    else:
        print(f"Unknown command: {command}")
        print(__doc__)
        sys.exit(1)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
