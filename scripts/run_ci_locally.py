#!/usr/bin/env python3
"""
Run the CI checks locally in the ACTIVE virtual environment.

  1) uv sync --active --extra test [--frozen if uv.lock exists]
  2) black --check (line length 120) on the package, scripts and tests
  3) mypy on the package and scripts
  4) pytest tests/ with coverage on patent_names

Commands run from the repo root (the directory holding pyproject.toml).
"""

import os
import sys
import shutil
import subprocess
from pathlib import Path

LINT_TARGETS = ["patent_names", "scripts", "tests"]
TYPE_TARGETS = ["patent_names", "scripts"]
COVERAGE_FLOOR = 90


def repo_root() -> Path:
    here = Path(__file__).resolve().parent
    for d in [here] + list(here.parents):
        if (d / "pyproject.toml").exists():
            return d
    return here


REPO = repo_root()


def tool(name: str) -> list[str]:
    """Prefer the tool on PATH, fall back to running it as a module of this interpreter."""
    path = shutil.which(name)
    return [path] if path else [sys.executable, "-m", name]


def run(cmd: list[str], *, env: dict[str, str] | None = None) -> None:
    print(">>>", " ".join(cmd))
    subprocess.run(cmd, check=True, cwd=str(REPO), env=env)


def main() -> None:
    if shutil.which("uv"):
        sync_args = ["uv", "sync", "--active", "--extra", "test"]
        if (REPO / "uv.lock").exists():
            sync_args.append("--frozen")
        run(sync_args)

    run(tool("black") + [*LINT_TARGETS, "--check", "--line-length", "120"])
    run(tool("mypy") + [*TYPE_TARGETS, "--ignore-missing-imports"])

    env = os.environ.copy()
    env["PYTHONPATH"] = str(REPO)
    run(
        tool("pytest")
        + ["tests/", "--cov=patent_names", "--cov-report=term-missing", f"--cov-fail-under={COVERAGE_FLOOR}"],
        env=env,
    )

    print("\nALL CHECKS PASSED")


if __name__ == "__main__":
    try:
        main()
    except subprocess.CalledProcessError as e:
        print(f"\nCommand failed with exit code {e.returncode}", file=sys.stderr)
        sys.exit(e.returncode)
