#!/usr/bin/env python3
"""autograde CLI — remaps `autograde [args...]` to `java -jar AutoGrade.jar [args...]`.

This is the installable CLI entrypoint (console_scripts).

Entry points:
- autograde          → shell mode: the space-joined command line runs through the system shell
- autograde-direct   → direct mode: java is started with an argument vector, no shell

Neither entry point recognizes flags of its own; every argument, including
--help, is forwarded to the grader.

Exit codes:
- the grader's own exit code (128 + N when it is killed by signal N)
- 126: the launcher could not be executed
- 127: the launcher (or the shell) was not found
"""

from __future__ import annotations

import sys
from typing import Callable

from autograde.commands.forward import forward_argv, forward_shell
from autograde.core.command_line import CommandRecord


EXIT_CANNOT_EXECUTE = 126
EXIT_NOT_FOUND = 127


def _launch_failure_status(exc: OSError) -> int:
    if isinstance(exc, FileNotFoundError):
        return EXIT_NOT_FOUND
    return EXIT_CANNOT_EXECUTE


def _run(label: str, forward: Callable[[list[str]], CommandRecord], argv: list[str] | None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        record = forward(args)
    except OSError as e:
        print(f"[{label}] ERROR: {e}", file=sys.stderr)
        return _launch_failure_status(e)
    return record.exit_code


def main(argv: list[str] | None = None) -> int:
    return _run("autograde", forward_shell, argv)


def main_direct(argv: list[str] | None = None) -> int:
    return _run("autograde-direct", forward_argv, argv)


if __name__ == "__main__":
    sys.exit(main())
