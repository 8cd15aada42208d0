"""
System interaction utilities.

Command execution with logging, and discovery of the `wevtutil` tool that
exposes the Windows event log subsystem.
"""

from .commands import build_wevtutil_command, check_wevtutil_installed, run_command

__all__ = [
    "build_wevtutil_command",
    "check_wevtutil_installed",
    "run_command",
]
