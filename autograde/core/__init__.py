"""Lowest-level autograde launcher utilities.

Dependency direction rules:
- autograde.core must not import autograde.commands or autograde.cli
"""

from autograde.core.command_line import (
	LAUNCHER_PREFIX,
	MODE_ARGV,
	MODE_SHELL,
	CommandRecord,
	build_command_line,
	build_launcher_argv,
	command_record_to_dict,
)

__all__ = [
	"CommandRecord",
	"LAUNCHER_PREFIX",
	"MODE_ARGV",
	"MODE_SHELL",
	"build_command_line",
	"build_launcher_argv",
	"command_record_to_dict",
]
