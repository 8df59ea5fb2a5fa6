# Copyright (C) Izhar Ahmad 2025-2026

from __future__ import annotations

from typing import Any
from vitals.tools.base import Tool

import inspect

__all__ = (
    "Function",
)


class Function(Tool):
    """Base class for functions.

    Functions are tools that can be called by language models. In simpler
    words, these are actions such as inspecting disk usage of host.

    To define a function, :meth:`ToolRegistry.tool` decorator is typically used
    to decorate a class that inherits from this class::

        @registry.tool
        class GetUptime(vitals.tools.Function):
            '''Get host uptime'''
            __tool_name__ = "get_uptime"

            def callback(self, ctx):
                return vitals.probes.run_command(("uptime",))

    All functions must define the :meth:`.callback` method and the parameters
    are defined as attributes of this class. This class is a Pydantic model
    so the attributes (parameters for function) support all of Pydantic field
    validation features. Arguments that are not declared are ignored.
    """

    __tool_type__ = "function"

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any):
        description = kwargs.get("description")

        if description is None:
            if cls.__doc__ is None:
                raise TypeError("description must be provided as subclass parameter or as docstring")

            description = inspect.cleandoc(cls.__doc__).splitlines()[0]

        name = kwargs.get("name", cls.__dict__.get("__tool_name__"))
        cls.__tool_name__ = name or cls.__qualname__
        cls.__tool_description__ = description

    @classmethod
    def dump(cls):
        params = cls.model_json_schema()
        params.pop("title", None)

        return {
            "type": "function",
            "function": {
                "name": cls.__tool_name__,
                "description": cls.__tool_description__,
                "parameters": params,
            },
        }
