# Copyright (C) Izhar Ahmad 2025-2026

"""The host inspection tools advertised to the model."""

from __future__ import annotations

from vitals import probes
from vitals.tools.context import ToolCallContext
from vitals.tools.functions import Function
from vitals.tools.registry import ToolRegistry

__all__ = (
    "host_tools",
    "GetStorageInfo",
    "GetMemoryInfo",
)

host_tools = ToolRegistry("host")


@host_tools.tool
class GetStorageInfo(Function):
    """Get storage info"""

    __tool_name__ = "get_storage_info"

    def callback(self, ctx: ToolCallContext) -> str:
        return probes.storage_info()


@host_tools.tool
class GetMemoryInfo(Function):
    """Get memory info"""

    __tool_name__ = "get_memory_info"

    def callback(self, ctx: ToolCallContext) -> str:
        return probes.memory_info()
