#!/usr/bin/env python3
"""Strict forwarder to `python -m autograde` for source checkouts."""

from __future__ import annotations

import os
import sys
from pathlib import Path


def main() -> int:
    repo_root = Path(__file__).resolve().parents[1]
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(p for p in (str(repo_root), env.get("PYTHONPATH", "")) if p)
    os.execve(sys.executable, [sys.executable, "-m", "autograde", *sys.argv[1:]], env)
    return 3


if __name__ == "__main__":
    raise SystemExit(main())
