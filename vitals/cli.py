# Copyright (C) Izhar Ahmad 2025-2026

"""Command line interface of vitals.

The model and prompt are always taken from ``ENV_MODEL_NAME`` and
``ENV_PROMPT`` environment variables; options only cover the rest.
"""

from __future__ import annotations

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from vitals.config import ReporterConfig
from vitals.data import HealthReport
from vitals.inference import OllamaInferenceBackend
from vitals.reporter import HealthReporter

import click
import logging

__all__ = (
    "main",
    "render_report",
)

_log = logging.getLogger(__name__)

_TIER_STYLES = {
    "excellent": "bold green",
    "good": "green",
    "warn": "yellow",
    "fatal": "bold red",
}


def render_report(report: HealthReport, console: Console) -> None:
    """Displays the health report as a table."""
    table = Table("Key", "Value", title="System Health")

    for key in ("overall_health", "storage_health", "memory_health"):
        tier = getattr(report, key)
        table.add_row(key.replace("_", " ").title(), f"[{_TIER_STYLES[tier]}]{tier}[/]")

    table.add_row("Memory Free", f"{report.memory_free_percent:g}%")
    table.add_row("Storage Used", f"{report.storage_used_percent:g}%")

    console.print(table)


def _output(content: str, pretty: bool) -> None:
    if pretty:
        try:
            report = HealthReport.model_validate_json(content)
        except ValidationError:
            _log.warning("Report does not match the health report schema, printing as-is")
        else:
            render_report(report, Console())
            return

    click.echo(content)


@click.command()
@click.option(
    "--host",
    default=None,
    help="Address of Ollama server. Defaults to OLLAMA_HOST or the client default.",
)
@click.option(
    "--keep-assistant-turn/--no-keep-assistant-turn",
    default=False,
    help="Send the model's tool calling message back along with tool outputs.",
)
@click.option("--pretty", is_flag=True, help="Render the report as a table.")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging.")
def main(host: str | None, keep_assistant_turn: bool, pretty: bool, verbose: bool) -> None:
    """Ask a local model for a short storage and memory health report."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = ReporterConfig.from_env(host=host, preserve_assistant_turn=keep_assistant_turn)
    _log.info("Using model %r", config.model)

    try:
        inference = OllamaInferenceBackend(model=config.model, host=config.host)
        content = HealthReporter.from_config(inference, config).run()
    except Exception as exc:
        _log.error("%s", exc)
        raise SystemExit(1) from None

    if content is None:
        return

    _output(content, pretty)
