"""Tests for the launcher command line join rule.

These tests verify:
- The prefix is followed by each argument after exactly one space
- No quoting or escaping is applied, even to whitespace or shell metacharacters
- Order and duplicates are preserved
- Direct-mode argv keeps argument boundaries
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from autograde.core import (
    LAUNCHER_PREFIX,
    MODE_ARGV,
    MODE_SHELL,
    CommandRecord,
    build_command_line,
    build_launcher_argv,
    command_record_to_dict,
)


class TestBuildCommandLine:
    def test_prefix_constant(self) -> None:
        assert LAUNCHER_PREFIX == "java -jar AutoGrade.jar"

    def test_no_arguments_is_prefix_exactly(self) -> None:
        assert build_command_line([]) == "java -jar AutoGrade.jar"

    def test_single_argument(self) -> None:
        assert build_command_line(["submissions"]) == "java -jar AutoGrade.jar submissions"

    def test_arguments_joined_with_single_spaces(self) -> None:
        args = ["--verbose", "hw1", "Driver.java"]
        assert build_command_line(args) == "java -jar AutoGrade.jar --verbose hw1 Driver.java"

    def test_embedded_space_is_not_quoted(self) -> None:
        assert build_command_line(["hello world"]) == "java -jar AutoGrade.jar hello world"

    def test_shell_metacharacters_are_not_escaped(self) -> None:
        assert build_command_line(["a;b", "$HOME", "'x'"]) == "java -jar AutoGrade.jar a;b $HOME 'x'"

    def test_empty_argument_still_gets_its_space(self) -> None:
        assert build_command_line(["", "x"]) == "java -jar AutoGrade.jar  x"

    def test_order_and_duplicates_preserved(self) -> None:
        args = ["c", "a", "b", "a"]
        assert build_command_line(args) == "java -jar AutoGrade.jar c a b a"

    def test_accepts_any_iterable(self) -> None:
        assert build_command_line(iter(["x", "y"])) == "java -jar AutoGrade.jar x y"

    def test_custom_prefix(self) -> None:
        assert build_command_line(["1"], prefix="echo") == "echo 1"

    def test_non_string_argument_rejected(self) -> None:
        with pytest.raises(TypeError, match=r"argument\[1\]"):
            build_command_line(["ok", 3])  # type: ignore[list-item]


class TestBuildLauncherArgv:
    def test_no_arguments(self) -> None:
        assert build_launcher_argv([]) == ["java", "-jar", "AutoGrade.jar"]

    def test_embedded_space_kept_as_one_entry(self) -> None:
        assert build_launcher_argv(["hello world", "b"]) == ["java", "-jar", "AutoGrade.jar", "hello world", "b"]

    def test_empty_prefix_rejected(self) -> None:
        with pytest.raises(ValueError, match="prefix"):
            build_launcher_argv(["x"], prefix="   ")


def test_command_record_to_dict_copies_argv() -> None:
    argv = ["java", "-jar", "AutoGrade.jar"]
    record = CommandRecord(mode=MODE_ARGV, command=argv, exit_code=2)
    d = command_record_to_dict(record)
    assert d == {"mode": "argv", "command": ["java", "-jar", "AutoGrade.jar"], "exit_code": 2}
    assert d["command"] is not argv


def test_command_record_to_dict_shell_mode() -> None:
    record = CommandRecord(mode=MODE_SHELL, command="java -jar AutoGrade.jar", exit_code=0)
    assert command_record_to_dict(record) == {
        "mode": "shell",
        "command": "java -jar AutoGrade.jar",
        "exit_code": 0,
    }
