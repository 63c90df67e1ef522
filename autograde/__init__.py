"""autograde launcher: maps `autograde [args...]` onto `java -jar AutoGrade.jar [args...]`.

The grader itself ships separately as AutoGrade.jar.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version


DIST_NAME = "autograde"


def _installed_version() -> str:
    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        # source checkout run through wrapper/autograde.py
        return "0.0.0"


def __getattr__(name: str) -> str:
    if name == "__version__":
        return _installed_version()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
