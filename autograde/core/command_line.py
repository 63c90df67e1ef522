from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable


LAUNCHER_PREFIX = "java -jar AutoGrade.jar"

MODE_SHELL = "shell"
MODE_ARGV = "argv"


@dataclass(frozen=True)
class CommandRecord:
    """One forwarded invocation: what was handed to the execution facility and what it reported."""

    mode: str
    command: str | list[str]
    exit_code: int


def _checked_args(args: Iterable[str]) -> list[str]:
    out: list[str] = []
    for i, arg in enumerate(args):
        if not isinstance(arg, str):
            raise TypeError(f"argument[{i}] must be str, got {type(arg).__name__}")
        out.append(arg)
    return out


def build_command_line(args: Iterable[str], *, prefix: str = LAUNCHER_PREFIX) -> str:
    """Join arguments onto the launcher prefix for shell mode.

    Each argument is appended verbatim after a single space. Nothing is
    quoted or escaped, so "hello world" becomes two tokens once the shell
    splits the line. With no arguments the result is the prefix exactly.
    """

    return prefix + "".join(" " + arg for arg in _checked_args(args))


def build_launcher_argv(args: Iterable[str], *, prefix: str = LAUNCHER_PREFIX) -> list[str]:
    """Argument vector for direct mode: prefix words, then each argument as its own entry."""

    head = prefix.split()
    if not head:
        raise ValueError("launcher prefix must not be empty")
    return [*head, *_checked_args(args)]


def command_record_to_dict(record: CommandRecord) -> dict[str, Any]:
    command = record.command if isinstance(record.command, str) else list(record.command)
    return {
        "mode": record.mode,
        "command": command,
        "exit_code": record.exit_code,
    }
