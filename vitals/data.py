# Copyright (C) Izhar Ahmad 2025-2026

from __future__ import annotations

from typing import Any, Literal
from pydantic import BaseModel, Field, Json

__all__ = (
    "Message",
    "ToolCall",
    "ChatResponse",
    "HealthReport",
)

HealthTier = Literal["excellent", "good", "warn", "fatal"]


class ToolCall(BaseModel):
    """Represents a tool call from a chat inference response.

    Attributes
    ----------
    name: :class:`str`
        The name of tool that has been called.
    arguments:
        Mapping of supplied arguments. The key is argument name and value
        is the argument value. Arguments sent as JSON string are decoded.
    """

    name: str
    arguments: dict[str, Any] | Json[dict[str, Any]] = Field(default_factory=dict)

    def dump(self) -> dict[str, Any]:
        """Converts the tool call to the wire format of chat messages."""
        return {
            "function": {
                "name": self.name,
                "arguments": dict(self.arguments),
            },
        }


class Message(BaseModel):
    """Represents a message for chat completion inference.

    Attributes
    ----------
    role: :class:`str`
        The role from which the message is originating i.e. user, assistant
        or tool.
    content: :class:`str`
        The message content.
    tool_calls: list[:class:`ToolCall`] | None
        The tool calls carried by this message. For assistant messages, these
        are the calls requested by model. For tool messages, this echoes the
        call whose result is in :attr:`.content`.
    """

    role: str
    content: str = ""
    tool_calls: list[ToolCall] | None = None

    def dump(self) -> dict[str, Any]:
        """Serializes the message to the format sent to chat server."""
        data: dict[str, Any] = {"role": self.role, "content": self.content}

        if self.tool_calls:
            data["tool_calls"] = [call.dump() for call in self.tool_calls]

        return data


class ChatResponse(BaseModel):
    """Represents the response of a chat completion inference i.e. :meth:`InferenceBackend.chat`

    Attributes
    ----------
    message: :class:`Message`
        The message replied by the model.
    """

    message: Message

    @property
    def tool_calls(self) -> list[ToolCall]:
        """The list of tools that were called. Empty if no tool was called."""
        return self.message.tool_calls or []


class HealthReport(BaseModel):
    """The health report produced by the model in reporting turn.

    This only mirrors :data:`vitals.defs.HEALTH_REPORT_SCHEMA` for rendering
    purposes; the schema sent to server is the literal one.
    """

    overall_health: HealthTier
    storage_health: HealthTier
    memory_health: HealthTier
    memory_free_percent: float
    storage_used_percent: float
