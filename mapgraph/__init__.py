"""
mapgraph - Undirected Graph of String-Labeled Vertices

An in-memory undirected graph data type meant as a building block for
graph algorithms. Vertices are strings created implicitly by edge
insertion; parallel edges are discarded and self-loops are rejected.

Main Classes:
    Graph: Abstract contract shared by all graph implementations
    MapGraph: Dictionary-of-sets implementation
    Edge: Unordered pair of distinct vertices
    UnknownVertexPolicy: How queries treat vertices not in the graph

Example:
    >>> from mapgraph import MapGraph
    >>> graph = MapGraph.from_lines(["A B C", "B C"])
    >>> graph.edge_count()
    3
"""

__version__ = "0.1.0"

from mapgraph.classes.edge import Edge
from mapgraph.classes.policy import UnknownVertexPolicy
from mapgraph.core.graph import Graph
from mapgraph.core.mapgraph import MapGraph
from mapgraph.exceptions import (
    GraphError,
    GraphFormatError,
    GraphLoadError,
    SelfLoopError,
    VertexNotFoundError,
)

__all__ = [
    'Graph',
    'MapGraph',
    'Edge',
    'UnknownVertexPolicy',
    'GraphError',
    'GraphFormatError',
    'GraphLoadError',
    'SelfLoopError',
    'VertexNotFoundError',
]
