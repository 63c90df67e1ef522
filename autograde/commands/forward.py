from __future__ import annotations

import signal
import subprocess
from contextlib import contextmanager
from typing import Any, Iterable, Iterator

from autograde.core.command_line import (
    LAUNCHER_PREFIX,
    MODE_ARGV,
    MODE_SHELL,
    CommandRecord,
    build_command_line,
    build_launcher_argv,
)


def exit_status(returncode: int) -> int:
    """Map a subprocess return code to the status a POSIX shell would report.

    Negative codes mean the child died from signal -returncode.
    """

    if returncode < 0:
        return 128 - returncode
    return returncode


@contextmanager
def _interrupts_ignored() -> Iterator[None]:
    # The child owns the terminal while it runs; the parent only waits.
    previous = {}
    for signal_name in ("SIGINT", "SIGQUIT"):
        sig = getattr(signal, signal_name, None)
        if sig is None:
            continue
        try:
            previous[sig] = signal.signal(sig, signal.SIG_IGN)
        except ValueError:
            # not the main thread
            continue
    try:
        yield
    finally:
        for sig, handler in previous.items():
            # None: the handler was installed outside Python and cannot be restored.
            signal.signal(sig, signal.SIG_DFL if handler is None else handler)


def _spawn_and_wait(command: str | list[str], **popen_kwargs: Any) -> int:
    # Spawn before ignoring: SIG_IGN would survive exec and reach the grader.
    proc = subprocess.Popen(command, **popen_kwargs)
    with _interrupts_ignored():
        proc.wait()
    return exit_status(proc.returncode)


def forward_shell(args: Iterable[str], *, prefix: str = LAUNCHER_PREFIX) -> CommandRecord:
    """Run the space-joined launcher command line through the system shell.

    The shell is invoked exactly once and its result code becomes the
    record's exit_code. OSError is raised only when the shell itself
    cannot be started.
    """

    command = build_command_line(args, prefix=prefix)
    return CommandRecord(mode=MODE_SHELL, command=command, exit_code=_spawn_and_wait(command, shell=True))


def forward_argv(args: Iterable[str], *, prefix: str = LAUNCHER_PREFIX) -> CommandRecord:
    """Run the launcher directly with an argument vector, bypassing the shell.

    Arguments keep their boundaries. OSError (launcher missing or not
    executable) propagates to the caller.
    """

    argv = build_launcher_argv(args, prefix=prefix)
    return CommandRecord(mode=MODE_ARGV, command=argv, exit_code=_spawn_and_wait(argv))
