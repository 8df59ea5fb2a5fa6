# Copyright (C) Izhar Ahmad 2025-2026

"""Host probes.

Each probe runs a single inspection command and returns its standard output
as-is. No parsing is done here; interpreting the text is left to the model.
"""

from __future__ import annotations

from typing import Sequence
from vitals.errors import ProbeError

import logging
import subprocess
import sys

__all__ = (
    "STORAGE_COMMAND",
    "memory_command",
    "run_command",
    "storage_info",
    "memory_info",
)

_log = logging.getLogger(__name__)

STORAGE_COMMAND = ("df", "-h", ".")


def memory_command(platform: str | None = None) -> tuple[str, ...]:
    """Returns the command used for inspecting memory state on given platform.

    ``memory_pressure`` only ships with macOS so other hosts fall back
    to ``free -h``.

    Parameters
    ----------
    platform: :class:`str` | None
        The platform identifier, as in :data:`sys.platform`. Defaults to
        the current platform.
    """
    if platform is None:
        platform = sys.platform

    if platform == "darwin":
        return ("memory_pressure",)

    return ("free", "-h")


def run_command(command: Sequence[str]) -> str:
    """Runs the command to completion and returns its standard output.

    Raises
    ------
    ProbeError
        The command could not be spawned or exited with a non-zero status.
    """
    _log.info("Running probe command: %s", " ".join(command))

    try:
        result = subprocess.run(
            list(command),
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            check=True,
        )
    except subprocess.CalledProcessError as exc:
        raise ProbeError(command, exc.returncode, exc.stderr or "") from exc
    except OSError as exc:
        raise ProbeError(command, stderr=str(exc)) from exc

    return result.stdout


def storage_info() -> str:
    """Disk usage of the filesystem holding the current directory."""
    return run_command(STORAGE_COMMAND)


def memory_info() -> str:
    """Current memory state of the host."""
    return run_command(memory_command())
