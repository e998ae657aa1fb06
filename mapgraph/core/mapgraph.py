"""
Hash-based undirected graph.

This module provides MapGraph, the dictionary-of-sets implementation of the
Graph contract, together with its construction paths: empty, copy and bulk
load from delimited text.
"""

import logging
import sys
from typing import Dict, Iterable, Iterator, Optional, Set

from ..classes.policy import UnknownVertexPolicy
from ..exceptions import GraphFormatError, SelfLoopError, VertexNotFoundError
from ..formats.read_delimited import check_delimiter, iter_records, read_lines
from .graph import Graph

logger = logging.getLogger(__name__)


class MapGraph(Graph):
    """
    Undirected graph stored as a mapping from vertex label to neighbor set.

    Parallel edges are discarded and self-loops are rejected. Adjacency sets
    are never handed out; queries return iterators over them.

    The structure is not safe for concurrent mutation.
    """

    def __init__(self, graph: Optional[Graph] = None,
                 policy: UnknownVertexPolicy = UnknownVertexPolicy.RAISE,
                 intern_labels: bool = False):
        """
        Initialize an empty graph, or a copy of another one.

        Args:
            graph: Optional graph whose vertices and edges are copied
            policy: How queries treat vertices that are not in the graph
            intern_labels: Pass labels through sys.intern before storing them
        """
        self.policy = UnknownVertexPolicy(policy)
        self.intern_labels = intern_labels

        # vertex label -> set of neighboring labels
        self._adjacency: Dict[str, Set[str]] = {}
        self._edges = 0

        if graph is not None:
            for v in graph.vertices():
                for w in graph.adjacent_to(v):
                    self.add_edge(v, w)
            logger.debug(f"Copied graph with {self.vertex_count()} vertices and {self._edges} edges")

    # ========================================================================
    # CONSTRUCTION
    # ========================================================================

    @classmethod
    def from_graph(cls, graph: Graph, **kwargs) -> "MapGraph":
        """
        Create an independent copy of any Graph implementation.

        Args:
            graph: Source graph
            **kwargs: Passed to the constructor (policy, intern_labels)
        """
        return cls(graph, **kwargs)

    @classmethod
    def from_lines(cls, lines: Iterable[str], delimiter: Optional[str] = None, **kwargs) -> "MapGraph":
        """
        Build a graph from delimited text lines.

        The first field on each line is a hub; an edge is added between the
        hub and every other field on that line. Lines with fewer than two
        fields add nothing.

        Args:
            lines: Source lines, processed in order
            delimiter: Field separator; None splits on runs of whitespace
            **kwargs: Passed to the constructor (policy, intern_labels)

        Returns:
            The populated graph

        Raises:
            GraphFormatError: If a line pairs a hub with itself
            GraphLoadError: If lines come from a source that fails to read
            ValueError: If delimiter is an empty string
        """
        check_delimiter(delimiter)
        graph = cls(**kwargs)
        for lineno, line, hub, neighbors in iter_records(lines, delimiter):
            for neighbor in neighbors:
                try:
                    graph.add_edge(hub, neighbor)
                except SelfLoopError as exc:
                    raise GraphFormatError(str(exc), lineno, line) from exc

        logger.debug(f"Loaded graph with {graph.vertex_count()} vertices and {graph.edge_count()} edges")
        return graph

    @classmethod
    def from_file(cls, filename: str, delimiter: Optional[str] = None,
                  encoding: str = "utf-8", **kwargs) -> "MapGraph":
        """
        Build a graph from a delimited text file.

        Args:
            filename: Path of the file
            delimiter: Field separator; None splits on runs of whitespace
            encoding: Text encoding of the file
            **kwargs: Passed to the constructor (policy, intern_labels)

        Raises:
            GraphLoadError: If the file cannot be read
            GraphFormatError: If a line pairs a hub with itself
        """
        logger.debug(f"Reading graph from {filename}")
        return cls.from_lines(read_lines(filename, encoding), delimiter, **kwargs)

    def copy(self) -> "MapGraph":
        """Return an independent copy with the same policy settings."""
        return type(self)(self, policy=self.policy, intern_labels=self.intern_labels)

    __copy__ = copy

    # ========================================================================
    # MUTATION
    # ========================================================================

    def add_edge(self, v: str, w: str) -> None:
        """
        Add the edge v-w to this graph if it is not already an edge.

        Unknown endpoints are created first.

        Args:
            v: One vertex in the edge
            w: The other vertex in the edge

        Raises:
            SelfLoopError: If v and w are the same vertex; the graph is left
                unchanged
        """
        if v == w:
            raise SelfLoopError(v)
        if self.intern_labels:
            v, w = sys.intern(v), sys.intern(w)

        v_neighbors = self._adjacency.setdefault(v, set())
        w_neighbors = self._adjacency.setdefault(w, set())

        if w not in v_neighbors:
            v_neighbors.add(w)
            w_neighbors.add(v)
            self._edges += 1

    # ========================================================================
    # QUERIES
    # ========================================================================

    def _neighbors(self, v: str, checked: bool) -> Optional[Set[str]]:
        """Look up the adjacency set of v, raising if checked and unknown."""
        neighbors = self._adjacency.get(v)
        if neighbors is None and checked:
            raise VertexNotFoundError(v)
        return neighbors

    def has_edge(self, v: str, w: str) -> bool:
        """
        Return True if v and w are connected.

        Raises:
            VertexNotFoundError: If v is unknown and the policy is not TOTAL
        """
        neighbors = self._neighbors(v, self.policy is not UnknownVertexPolicy.TOTAL)
        return neighbors is not None and w in neighbors

    def has_vertex(self, v: str) -> bool:
        return v in self._adjacency

    def vertices(self) -> Iterator[str]:
        """Return an iterator over all vertices."""
        return iter(self._adjacency)

    def adjacent_to(self, v: str) -> Iterator[str]:
        """
        Return an iterator over the neighbors of v.

        Raises:
            VertexNotFoundError: If v is unknown and the policy is not TOTAL
        """
        neighbors = self._neighbors(v, self.policy is not UnknownVertexPolicy.TOTAL)
        return iter(neighbors if neighbors is not None else ())

    def vertex_count(self) -> int:
        """Return the number of vertices in this graph."""
        return len(self._adjacency)

    def edge_count(self) -> int:
        """Return the number of edges in this graph."""
        return self._edges

    def degree(self, v: str) -> int:
        """
        Return the number of neighbors of v, 0 for an unknown vertex.

        Raises:
            VertexNotFoundError: If v is unknown and the policy is STRICT
        """
        neighbors = self._neighbors(v, self.policy is UnknownVertexPolicy.STRICT)
        return len(neighbors) if neighbors is not None else 0
