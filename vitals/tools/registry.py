# Copyright (C) Izhar Ahmad 2025-2026

from __future__ import annotations

from typing import Any, Mapping, Sequence
from types import MappingProxyType
from pydantic import ValidationError

from vitals.data import Message, ToolCall
from vitals.tools.base import Tool
from vitals.tools.context import ToolCallContext
from vitals.tools.errors import NoSuchFunction, ToolError

import logging

__all__ = (
    "ToolRegistry",
)

_log = logging.getLogger(__name__)


class ToolRegistry:
    """A named set of tools that can be called by the model.

    Example usage::

        import vitals

        uptime = vitals.tools.ToolRegistry("uptime")

        @uptime.tool
        class GetUptime(vitals.tools.Function):
            ...  # code for the tool

    Parameters
    ----------
    name: :class:`str`
        The name of this registry.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._tools: dict[str, type[Tool]] = {}
        self._tools_data: list[dict[str, Any]] | None = None

    def __repr__(self) -> str:
        return f"<ToolRegistry name={self.name!r} tools={list(self._tools)!r}>"

    def tool(self, tool_tp: type[Tool] | None = None):
        """Registers a decorated class as tool.

        This is a decorator based interface for :meth:`.add_tool`. Example
        usage::

            @registry.tool()
            class GetStorageInfo(vitals.tools.Function):
                '''Get storage info'''
                __tool_name__ = "get_storage_info"

                def callback(self, ctx):
                    return vitals.probes.storage_info()
        """
        if tool_tp is not None:
            self.add_tool(tool_tp)
            return tool_tp

        def __wrapper(tool_tp: type[Tool]):
            self.add_tool(tool_tp)
            return tool_tp

        return __wrapper

    def add_tool(self, tool: type[Tool], *, override: bool = False) -> None:
        """Registers a tool that can be called by the model.

        Parameters
        ----------
        tool: type[:class:`Tool`]
            The tool to add.
        override: :class:`bool`
            Whether to override the tool if an existing one is registered with the
            same name. Defaults to False.

            An error is raised if this is false and a tool is being added that has
            the same name as one already added.
        """
        if self._tools.get(tool.__tool_name__) is not None and not override:
            raise ValueError(f"Tool with name {tool.__tool_name__!r} already registered")

        self._tools[tool.__tool_name__] = tool
        self._tools_data = None

    def remove_tool(self, tool: type[Tool] | str, *, raise_error: bool = True) -> None:
        """Removes an already registered tool.

        Parameters
        ----------
        tool: type[:class:`Tool`] | :class:`str`
            The tool's name or the tool class.
        raise_error: :class:`bool`
            If true (default), raise an error if tool to be removed does not exist.
        """
        if not isinstance(tool, str):
            tool = tool.__tool_name__

        try:
            self._tools.pop(tool)
        except KeyError:
            if raise_error:
                raise ValueError("Invalid tool name") from None
        else:
            self._tools_data = None

    def tools(self) -> Mapping[str, type[Tool]]:
        """Returns an immutable mapping of registered tools."""
        return MappingProxyType(self._tools)

    def dump(self) -> list[dict[str, Any]]:
        """Returns the serialized declarations of registered tools, in registration order."""
        if self._tools_data is None:
            self._tools_data = [t.dump() for t in self._tools.values()]

        return list(self._tools_data)

    def call(self, call: ToolCall) -> str:
        """Runs the tool requested by given call and returns its output.

        Raises
        ------
        NoSuchFunction
            No tool is registered with the called name.
        ToolError
            The arguments do not match the tool parameters, or the tool
            failed unexpectedly.
        """
        try:
            tool_tp = self._tools[call.name]
        except KeyError:
            _log.error("no such func: %s", call.name)
            raise NoSuchFunction(call.name) from None

        try:
            tool = tool_tp(**call.arguments)
        except ValidationError as exc:
            raise ToolError._from_exc(exc) from exc

        ctx = ToolCallContext(registry=self, tool=tool, call=call)
        return ctx._call()

    def dispatch(self, messages: Sequence[Message], tool_calls: Sequence[ToolCall]) -> list[Message]:
        """Runs the given tool calls in order and appends their responses to messages.

        Each successful call appends a ``tool`` message holding the output
        of tool and echoing the call. Calls to the same tool are run once
        each.

        The given messages are not modified; a new list is returned. If a
        call fails, the error is propagated and no messages are returned.

        Parameters
        ----------
        messages: list[:class:`Message`]
            The conversation so far.
        tool_calls: list[:class:`ToolCall`]
            The calls requested by the model.

        Returns
        -------
        list[:class:`Message`]
        """
        result = list(messages)

        for call in tool_calls:
            output = self.call(call)
            _log.info("Tool %r returned %d characters", call.name, len(output))
            result.append(
                Message(
                    role="tool",
                    content=output,
                    tool_calls=[ToolCall(name=call.name, arguments=call.arguments)],
                )
            )

        return result
