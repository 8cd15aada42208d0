"""
Command execution utilities.

This module provides functions for executing external commands and checking
that the event log command line tool is available.
"""

import logging
import shutil
import subprocess
from typing import List, Optional, Sequence, Tuple

from ..validation import ErrorSeverity, handle_subprocess_error

logger = logging.getLogger(__name__)


def run_command(
    command: Sequence[str], timeout: Optional[float] = None
) -> Tuple[int, str, str]:
    """Execute a command and capture its output.

    Args:
        command: Program and arguments; no shell is involved.
        timeout: Seconds to wait before the command is killed, None for no limit.

    Returns:
        Tuple of (return_code, stdout_string, stderr_string).
        return_code is -1 when the command could not be run or timed out.

    Note:
        Uses UTF-8 decoding with error replacement, since wevtutil output may
        contain characters outside the console code page.
    """
    command = list(command)
    logger.debug(f"Executing command: {' '.join(command)}")
    try:
        process = subprocess.run(
            command,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
            check=False,
        )
        return process.returncode, process.stdout, process.stderr
    except FileNotFoundError as e:
        handle_subprocess_error(e, command[0], reraise=False, logger=logger)
        return -1, "", f"Error: Command not found '{command[0]}'"
    except subprocess.TimeoutExpired as e:
        handle_subprocess_error(e, " ".join(command), reraise=False, logger=logger)
        return -1, "", f"Error: Command timed out after {timeout} seconds"
    except OSError as e:
        handle_subprocess_error(
            e, command[0], severity=ErrorSeverity.CRITICAL, reraise=False, logger=logger
        )
        return -1, "", f"An unexpected error occurred: {e}"


def build_wevtutil_command(
    wevtutil_path: str, verb: str, *args: str, computer_name: Optional[str] = None
) -> List[str]:
    """Assemble a wevtutil command line.

    Examples:
        >>> build_wevtutil_command("wevtutil", "gl", "Security")
        ['wevtutil', 'gl', 'Security']
        >>> build_wevtutil_command("wevtutil", "el", computer_name="DC01")
        ['wevtutil', 'el', '/r:DC01']
    """
    command = [wevtutil_path, verb, *args]
    if computer_name:
        command.append(f"/r:{computer_name}")
    return command


def check_wevtutil_installed(wevtutil_path: str = "wevtutil") -> bool:
    """Check if wevtutil is available on the system PATH (or at the given path)."""
    return shutil.which(wevtutil_path) is not None
