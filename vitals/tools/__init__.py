# Copyright (C) Izhar Ahmad 2025-2026

from vitals.tools.base import *
from vitals.tools.errors import *
from vitals.tools.functions import *
from vitals.tools.context import ToolCallContext as ToolCallContext
from vitals.tools.registry import *
from vitals.tools.host import *
