"""Execution facilities for the autograde launcher.

These modules implement *how* the composed launcher command is run.
The join rule itself lives in autograde.core.command_line.
"""

from __future__ import annotations
