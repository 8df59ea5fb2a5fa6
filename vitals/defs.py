# Copyright (C) Izhar Ahmad 2025-2026

from __future__ import annotations

from typing import Any

ENV_MODEL_NAME = "ENV_MODEL_NAME"
ENV_PROMPT = "ENV_PROMPT"

DEFAULT_MODEL = "llama3.2:3b"
DEFAULT_PROMPT = "Get Storage/memory info and generate short health report(<350 chars)."

HEALTH_TIERS = ("excellent", "good", "warn", "fatal")

# Sent verbatim as the `format` of the reporting turn.
HEALTH_REPORT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "overall_health": {"type": "string", "enum": list(HEALTH_TIERS)},
        "storage_health": {"type": "string", "enum": list(HEALTH_TIERS)},
        "memory_health": {"type": "string", "enum": list(HEALTH_TIERS)},
        "memory_free_percent": {"type": "number"},
        "storage_used_percent": {"type": "number"},
    },
    "required": [
        "overall_health",
        "storage_health",
        "memory_health",
        "memory_free_percent",
        "storage_used_percent",
    ],
}

NO_CALLS_MESSAGE = "no calls got. try again"
TOO_FEW_CALLS_MESSAGE = "too few calls. try again"
