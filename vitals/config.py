# Copyright (C) Izhar Ahmad 2025-2026

from __future__ import annotations

from typing import Mapping
from pydantic import BaseModel, Field

from vitals import defs

import os

__all__ = (
    "resolve_model",
    "resolve_prompt",
    "ReporterConfig",
)


def resolve_model(environ: Mapping[str, str] | None = None) -> str:
    """Returns the model name from ``ENV_MODEL_NAME``, or the default model if unset or empty."""
    if environ is None:
        environ = os.environ

    return environ.get(defs.ENV_MODEL_NAME) or defs.DEFAULT_MODEL


def resolve_prompt(environ: Mapping[str, str] | None = None) -> str:
    """Returns the seed prompt from ``ENV_PROMPT``, or the default prompt if unset or empty."""
    if environ is None:
        environ = os.environ

    return environ.get(defs.ENV_PROMPT) or defs.DEFAULT_PROMPT


class ReporterConfig(BaseModel):
    """Configuration for a single health report run."""

    model: str = Field(
        default=defs.DEFAULT_MODEL,
        description="Model name served by the Ollama server.",
    )
    prompt: str = Field(
        default=defs.DEFAULT_PROMPT,
        description="Content of the seed user message.",
    )
    host: str | None = Field(
        default=None,
        description="Address of Ollama server. None defers to the client's OLLAMA_HOST handling.",
    )
    preserve_assistant_turn: bool = Field(
        default=False,
        description="Whether to keep the model's tool calling message before tool results.",
    )
    expected_tool_calls: int = Field(
        default=2,
        description="The exact number of tool calls accepted from the first turn.",
    )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides) -> ReporterConfig:
        """Builds the configuration from environment variables.

        Keyword arguments override the resolved values, except that
        ``model`` and ``prompt`` always come from the environment.
        """
        overrides.update(
            model=resolve_model(environ),
            prompt=resolve_prompt(environ),
        )
        return cls(**overrides)
