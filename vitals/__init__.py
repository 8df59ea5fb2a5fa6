"""
VITALS
~~~~~~

Short system health reports from a locally hosted language model.
"""
from vitals.reporter import *
from vitals import (
    config as config,
    data as data,
    defs as defs,
    errors as errors,
    inference as inference,
    probes as probes,
    tools as tools,
)

__version__ = "0.1.0"
__author__ = "Izhar Ahmad <izxxr>"
