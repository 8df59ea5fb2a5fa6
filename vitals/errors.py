# Copyright (C) Izhar Ahmad 2025-2026

from __future__ import annotations

from typing import Sequence

__all__ = (
    "VitalsError",
    "ProbeError",
)


class VitalsError(Exception):
    """Base class for all errors raised by vitals.

    Errors coming from the chat server (such as :class:`ollama.ResponseError`
    or connection errors) are not wrapped and propagate as they are.

    Parameters
    ----------
    message: :class:`str`
        The message pertaining to this error.
    """
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ProbeError(VitalsError):
    """Raised when a host probe command cannot be spawned or exits with failure.

    Attributes
    ----------
    command: tuple[:class:`str`, ...]
        The command that was run.
    returncode: :class:`int` | None
        The exit status of command. None if the command could not be spawned.
    stderr: :class:`str`
        The standard error output of command, if any.
    """
    def __init__(
        self,
        command: Sequence[str],
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        self.command = tuple(command)
        self.returncode = returncode
        self.stderr = stderr

        cmd = " ".join(self.command)
        if returncode is None:
            message = f"failed to run {cmd!r}"
        else:
            message = f"{cmd!r} exited with status {returncode}"
        if stderr.strip():
            message = f"{message}: {stderr.strip()}"

        super().__init__(message)
