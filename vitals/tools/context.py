# Copyright (C) Izhar Ahmad 2025-2026

from __future__ import annotations

from typing import Any, Mapping, TYPE_CHECKING
from types import MappingProxyType
from functools import cached_property

from vitals.errors import VitalsError
from vitals.tools.errors import ToolError

if TYPE_CHECKING:
    from vitals.data import ToolCall
    from vitals.tools.base import Tool
    from vitals.tools.registry import ToolRegistry


class ToolCallContext:
    """Stateful class for holding contextual information of a tool call.

    This class is passed to tool callbacks for propagating state.
    """
    def __init__(
        self,
        registry: ToolRegistry,
        tool: Tool,
        call: ToolCall,
    ):
        self.registry = registry
        self.tool = tool
        self.call = call

    @cached_property
    def tool_args(self) -> Mapping[str, Any]:
        """The dictionary of arguments passed to called tool, as sent by the model.

        The key is the argument name and value is the passed value.
        """
        return MappingProxyType(dict(self.call.arguments))

    def _call(self) -> str:
        try:
            return self.tool.callback(self)
        except VitalsError:
            raise
        except Exception as exc:
            raise ToolError._from_exc(exc) from exc
