# Copyright (C) Izhar Ahmad 2025-2026

from __future__ import annotations

from typing import Any
from ollama import Client

from vitals import defs
from vitals.config import resolve_model
from vitals.data import (
    Message,
    ToolCall,
    ChatResponse,
)

import logging

__all__ = (
    "InferenceBackend",
    "OllamaInferenceBackend",
)

_log = logging.getLogger(__name__)


class InferenceBackend:
    """Base class for all inference backends.

    This class provides a common interface for issuing chat requests to
    a model server. The only built-in backend is :class:`OllamaInferenceBackend`
    however, other backends may be implemented as well.
    """

    def chat(
        self,
        messages: list[Message],
        tools: list[dict[str, Any]] | None = None,
        formatted: bool = False,
    ) -> ChatResponse:
        """Performs a single, non-streamed chat completion inference.

        Parameters
        ----------
        messages: list[:class:`Message`]
            The conversation so far.
        tools: list[dict]
            The serialized tool declarations that the model can call. Possibly
            empty.
        formatted: :class:`bool`
            Whether to constrain the reply to :data:`vitals.defs.HEALTH_REPORT_SCHEMA`.
            If false, the model replies in free text and may call tools.

        Returns
        -------
        :class:`ChatResponse`
        """
        raise NotImplementedError("Inference backend does not support chat completion")


class OllamaInferenceBackend(InferenceBackend):
    """Inference backend based on :class:`ollama.Client`

    Parameters
    ----------
    model: :class:`str` | None
        The model to use. If not provided, the model is resolved from
        ``ENV_MODEL_NAME`` environment variable on each request, falling
        back to ``llama3.2:3b``.
    host: :class:`str` | None
        The address of Ollama server. If not provided, the client resolves
        it from ``OLLAMA_HOST`` environment variable.
    client_options: dict | None
        The options to pass to :class:`ollama.Client` in case more granular
        control is needed of underlying client instance.
    """
    def __init__(
        self,
        model: str | None = None,
        host: str | None = None,
        client_options: dict[str, Any] | None = None,
    ):
        options: dict[str, Any] = {"host": host}

        if client_options is not None:
            options.update(client_options)

        self.model = model
        self.client = Client(**options)

    def _make_chat_response(self, data: Any) -> ChatResponse:
        message = data.message
        tool_calls = [
            ToolCall(
                name=call.function.name,
                arguments=call.function.arguments or {},
            )
            for call in (message.tool_calls or [])
        ]
        return ChatResponse(
            message=Message(
                role=message.role or "assistant",
                content=message.content or "",
                tool_calls=tool_calls or None,
            )
        )

    def chat(
        self,
        messages: list[Message],
        tools: list[dict[str, Any]] | None = None,
        formatted: bool = False,
    ) -> ChatResponse:
        if tools and formatted:
            raise TypeError("tools and formatted are mutually exclusive")

        model = self.model or resolve_model()
        _log.info("Chat request: model=%r messages=%d tools=%d formatted=%s",
                  model, len(messages), len(tools or []), formatted)

        data = self.client.chat(
            model=model,
            messages=[m.dump() for m in messages],
            tools=tools or [],
            stream=False,
            format=defs.HEALTH_REPORT_SCHEMA if formatted else None,
        )
        return self._make_chat_response(data)
