"""CLI tests, run through Click's CliRunner with the ollama client mocked out."""

from __future__ import annotations

import json
import subprocess
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from vitals.cli import main
from conftest import REPORT_JSON, ollama_response


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def mock_client():
    with patch("vitals.inference.Client") as client_cls:
        yield client_cls.return_value


def _happy(mock_client):
    mock_client.chat.side_effect = [
        ollama_response("", ("get_storage_info", {}), ("get_memory_info", {})),
        ollama_response(REPORT_JSON),
    ]


def test_prints_report(runner, mock_client, canned_probes, clean_env):
    _happy(mock_client)

    result = runner.invoke(main, [])

    assert result.exit_code == 0
    assert result.stdout == REPORT_JSON + "\n"

    second = mock_client.chat.call_args_list[1].kwargs
    tool_messages = [m for m in second["messages"] if m["role"] == "tool"]
    assert [m["content"] for m in tool_messages] == ["DF_OUT", "MP_OUT"]


def test_no_calls_exits_cleanly(runner, mock_client, canned_probes, clean_env, caplog):
    mock_client.chat.return_value = ollama_response("sure")

    result = runner.invoke(main, [])

    assert result.exit_code == 0
    assert result.stdout == ""
    assert "no calls got. try again" in caplog.text
    assert mock_client.chat.call_count == 1


def test_unknown_tool_exits_non_zero(runner, mock_client, canned_probes, clean_env, caplog):
    mock_client.chat.return_value = ollama_response(
        "", ("get_storage_info", {}), ("get_cpu_info", {})
    )

    result = runner.invoke(main, [])

    assert result.exit_code == 1
    assert result.stdout == ""
    assert "no such func: get_cpu_info" in caplog.text
    assert mock_client.chat.call_count == 1


def test_probe_failure_exits_non_zero(runner, mock_client, clean_env, caplog):
    mock_client.chat.return_value = ollama_response(
        "", ("get_storage_info", {}), ("get_memory_info", {})
    )

    with patch("vitals.probes.subprocess.run") as mock_run:
        mock_run.side_effect = subprocess.CalledProcessError(
            1, ["df", "-h", "."], output="", stderr="df: .: Permission denied\n"
        )
        result = runner.invoke(main, [])

    assert result.exit_code == 1
    assert result.stdout == ""
    assert mock_client.chat.call_count == 1
    assert "exited with status 1" in caplog.text


def test_env_overrides(runner, mock_client, canned_probes, monkeypatch):
    monkeypatch.setenv("ENV_MODEL_NAME", "custom:7b")
    monkeypatch.setenv("ENV_PROMPT", "X")
    _happy(mock_client)

    result = runner.invoke(main, [])

    assert result.exit_code == 0
    first = mock_client.chat.call_args_list[0].kwargs
    assert first["model"] == "custom:7b"
    assert first["messages"] == [{"role": "user", "content": "X"}]


def test_host_option(runner, canned_probes, clean_env):
    with patch("vitals.inference.Client") as client_cls:
        _happy(client_cls.return_value)
        result = runner.invoke(main, ["--host", "http://box:11434"])

    assert result.exit_code == 0
    client_cls.assert_called_once_with(host="http://box:11434")


def test_keep_assistant_turn(runner, mock_client, canned_probes, clean_env):
    _happy(mock_client)

    result = runner.invoke(main, ["--keep-assistant-turn"])

    assert result.exit_code == 0
    roles = [m["role"] for m in mock_client.chat.call_args_list[1].kwargs["messages"]]
    assert roles == ["user", "assistant", "tool", "tool"]


def test_pretty(runner, mock_client, canned_probes, clean_env):
    _happy(mock_client)

    result = runner.invoke(main, ["--pretty"])

    assert result.exit_code == 0
    assert "System Health" in result.stdout
    assert "42%" in result.stdout
    with pytest.raises(json.JSONDecodeError):
        json.loads(result.stdout)


def test_pretty_falls_back_to_raw(runner, mock_client, canned_probes, clean_env):
    mock_client.chat.side_effect = [
        ollama_response("", ("get_storage_info", {}), ("get_memory_info", {})),
        ollama_response("not json"),
    ]

    result = runner.invoke(main, ["--pretty"])

    assert result.exit_code == 0
    assert result.stdout == "not json\n"
