from __future__ import annotations

from types import SimpleNamespace

import pytest

from vitals.data import ChatResponse, Message, ToolCall
from vitals.inference import InferenceBackend

REPORT_JSON = (
    '{"overall_health":"good","storage_health":"good","memory_health":"good",'
    '"memory_free_percent":42.0,"storage_used_percent":55.0}'
)


def tool_calls_response(*names: str) -> ChatResponse:
    """Create a first turn response calling the given tools."""
    return ChatResponse(
        message=Message(
            role="assistant",
            content="",
            tool_calls=[ToolCall(name=name, arguments={}) for name in names] or None,
        )
    )


def content_response(content: str) -> ChatResponse:
    return ChatResponse(message=Message(role="assistant", content=content))


class FakeBackend(InferenceBackend):
    """Backend replaying canned responses and recording each request."""

    def __init__(self, *responses: ChatResponse) -> None:
        self.responses = list(responses)
        self.requests: list[SimpleNamespace] = []

    def chat(self, messages, tools=None, formatted=False):
        self.requests.append(
            SimpleNamespace(messages=list(messages), tools=tools, formatted=formatted)
        )
        return self.responses.pop(0)


def ollama_response(content: str = "", *calls: tuple[str, object]) -> SimpleNamespace:
    """Mimic the shape of :class:`ollama.ChatResponse`."""
    tool_calls = [
        SimpleNamespace(function=SimpleNamespace(name=name, arguments=args))
        for name, args in calls
    ]
    return SimpleNamespace(
        message=SimpleNamespace(role="assistant", content=content, tool_calls=tool_calls or None)
    )


@pytest.fixture
def canned_probes(monkeypatch):
    """Replace both host probes with canned outputs."""
    monkeypatch.setattr("vitals.probes.storage_info", lambda: "DF_OUT")
    monkeypatch.setattr("vitals.probes.memory_info", lambda: "MP_OUT")


@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.delenv("ENV_MODEL_NAME", raising=False)
    monkeypatch.delenv("ENV_PROMPT", raising=False)
