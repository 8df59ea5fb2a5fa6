# Copyright (C) Izhar Ahmad 2025-2026

from __future__ import annotations

from vitals.errors import VitalsError

__all__ = (
    "ToolError",
    "NoSuchFunction",
)


class ToolError(VitalsError):
    """Base class for all tools related error.

    Errors raised in tool callbacks that do not inherit from
    :class:`VitalsError` are wrapped in this class before being
    propagated.

    Parameters
    ----------
    message: :class:`str`
        The message pertaining to this error.

    Attributes
    ----------
    message: :class:`str`
        The message pertaining to this error.
    parent: :class:`BaseException`
        The causative exception. If this error was caused by another
        exception in tool's callback.
    """
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.parent: BaseException | None = None

    @classmethod
    def _from_exc(cls, parent: BaseException) -> ToolError:
        err = ToolError(message=str(parent) or type(parent).__name__)
        err.parent = parent
        return err


class NoSuchFunction(ToolError):
    """Raised when the model calls a tool that is not registered.

    Attributes
    ----------
    name: :class:`str`
        The name of tool called by the model.
    """
    def __init__(self, name: str) -> None:
        super().__init__(f"no such func: {name}")
        self.name = name
