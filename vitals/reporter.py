# Copyright (C) Izhar Ahmad 2025-2026

from __future__ import annotations

from typing import Any, TYPE_CHECKING

from vitals import defs
from vitals.config import resolve_prompt
from vitals.data import Message
from vitals.tools.host import host_tools

import logging

if TYPE_CHECKING:
    from vitals.config import ReporterConfig
    from vitals.data import ChatResponse
    from vitals.inference import InferenceBackend
    from vitals.tools.registry import ToolRegistry

__all__ = (
    "HealthReporter",
)

_log = logging.getLogger(__name__)


class HealthReporter:
    """Drives the two turn conversation producing a health report.

    In the first turn, the model is given the host tools and asked to call
    them. The requested calls are run locally and their outputs are sent
    back in the second turn, in which the model is constrained to reply
    with :data:`vitals.defs.HEALTH_REPORT_SCHEMA`.

    Parameters
    ----------
    inference: :class:`InferenceBackend`
        The backend used for chat requests.
    registry: :class:`ToolRegistry` | None
        The tools advertised to the model. Defaults to the host tools
        (``get_storage_info`` and ``get_memory_info``).
    prompt: :class:`str` | None
        The content of seed user message. If not provided, it is taken from
        ``ENV_PROMPT`` environment variable or the default prompt.
    preserve_assistant_turn: :class:`bool`
        Whether to insert the model's tool calling message before the tool
        responses in second turn. Defaults to false, in which case the tool
        responses directly follow the user message.
    expected_tool_calls: :class:`int`
        The exact number of tool calls the first turn must produce for the
        report to proceed. Defaults to 2.
    """

    def __init__(
        self,
        inference: InferenceBackend,
        registry: ToolRegistry | None = None,
        prompt: str | None = None,
        preserve_assistant_turn: bool = False,
        expected_tool_calls: int = 2,
    ):
        if registry is None:
            registry = host_tools

        if prompt is None:
            prompt = resolve_prompt()

        self.inference = inference
        self.registry = registry
        self.prompt = prompt
        self.preserve_assistant_turn = preserve_assistant_turn
        self.expected_tool_calls = expected_tool_calls

    @classmethod
    def from_config(cls, inference: InferenceBackend, config: ReporterConfig) -> HealthReporter:
        """Creates a reporter from a :class:`ReporterConfig`."""
        return cls(
            inference,
            prompt=config.prompt,
            preserve_assistant_turn=config.preserve_assistant_turn,
            expected_tool_calls=config.expected_tool_calls,
        )

    def setup_chat(self) -> tuple[list[Message], list[dict[str, Any]]]:
        """Returns the seed messages and the tool declarations for first turn."""
        messages = [Message(role="user", content=self.prompt)]
        return messages, self.registry.dump()

    def _check_tool_calls(self, response: ChatResponse) -> bool:
        count = len(response.tool_calls)

        if count == 0:
            _log.warning(defs.NO_CALLS_MESSAGE)
            return False

        if count != self.expected_tool_calls:
            _log.warning(defs.TOO_FEW_CALLS_MESSAGE)
            return False

        return True

    def run(self) -> str | None:
        """Runs the conversation and returns the content of final reply.

        Returns None, after logging the reason, if the model did not request
        the expected tool calls in first turn. No second turn is issued in
        that case.

        Errors from chat transport, tools and probes are propagated.
        """
        messages, tools = self.setup_chat()
        _log.info("Prompt: %r", self.prompt)

        response = self.inference.chat(messages, tools, formatted=False)
        _log.info("Tool calls: %r", [call.name for call in response.tool_calls])

        if not self._check_tool_calls(response):
            return None

        if self.preserve_assistant_turn:
            messages.append(response.message)

        messages = self.registry.dispatch(messages, response.tool_calls)

        final = self.inference.chat(messages, [], formatted=True)
        _log.info("Response: %r", final.message.content)

        return final.message.content
