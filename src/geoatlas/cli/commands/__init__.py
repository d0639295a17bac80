"""
CLI Commands Package.

Each command is implemented in its own module for maintainability.
"""

from . import graph
from . import heatmap
from . import index
from . import initialize
from . import scenario
from . import search

__all__ = [
    "graph",
    "heatmap",
    "index",
    "initialize",
    "scenario",
    "search",
]
