# Copyright (C) Izhar Ahmad 2025-2026

from __future__ import annotations

from typing import ClassVar, Any, TYPE_CHECKING
from pydantic import BaseModel

if TYPE_CHECKING:
    from vitals.tools.context import ToolCallContext

__all__ = (
    "Tool",
)

class Tool(BaseModel):
    """Base class for tools.

    Tools are advertised to the model which may then call them. Currently,
    the only type of tools are functions.
    """

    __tool_type__: ClassVar[str]
    __tool_name__: ClassVar[str]
    __tool_description__: ClassVar[str]

    @classmethod
    def dump(cls) -> dict[str, Any]:
        """Serializes the tool data.

        This returns a dictionary in standard format that can be sent
        to language models that support tools.
        """
        raise NotImplementedError("dump() must be defined by subclasses")

    def callback(self, ctx: ToolCallContext, /) -> str:
        """Callback method for the tool.

        This is called when this tool is called by the model. The returned
        text is sent back to the model as the tool's response.

        Parameters
        ----------
        ctx: :class:`ToolCallContext`
            The context of this tool call.
        """
        raise NotImplementedError("callback() must be defined by subclasses")
