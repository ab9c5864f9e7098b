#!/usr/bin/env python3
"""Development helpers for CoAuthorsQL.

    python dev_tasks.py {clean,format,lint,test,check,install-dev,serve}
"""
import pathlib
import shutil
import subprocess
import sys

SOURCES = ["coauthorsql", "tests", "examples"]

TASKS = {
    "format": [["black", *SOURCES], ["isort", *SOURCES]],
    "lint": [["mypy", "coauthorsql"], ["flake8", *SOURCES]],
    "test": [["pytest", "tests", "-v"]],
    "install-dev": [[sys.executable, "-m", "pip", "install", "-e", ".[dev,test,examples]"]],
    "serve": [[sys.executable, "-m", "examples.main"]],
}
TASKS["check"] = TASKS["lint"] + TASKS["test"]


def run_steps(steps):
    """Run every step and return how many of them failed."""
    failures = 0
    for argv in steps:
        print("$ " + " ".join(argv))
        if subprocess.run(argv).returncode != 0:
            failures += 1
    return failures


def clean():
    root = pathlib.Path(".")
    targets = [root / ".pytest_cache", root / ".mypy_cache", *root.glob("*.egg-info"), *root.rglob("__pycache__")]
    for path in targets:
        shutil.rmtree(path, ignore_errors=True)
    return 0


def main(argv):
    if len(argv) != 1 or (argv[0] not in TASKS and argv[0] != "clean"):
        print(__doc__.strip())
        return 2
    if argv[0] == "clean":
        return clean()
    return 1 if run_steps(TASKS[argv[0]]) else 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
