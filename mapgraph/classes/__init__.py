"""
Value types, configuration and helpers used by the graph classes.
"""

from .edge import Edge
from .policy import UnknownVertexPolicy

__all__ = [
    'Edge',
    'UnknownVertexPolicy',
]
