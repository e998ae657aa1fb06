"""
Core graph data structures.

This module contains the abstract graph contract and its hash-based
implementation.
"""

from .graph import Graph
from .mapgraph import MapGraph

__all__ = [
    'Graph',
    'MapGraph',
]
