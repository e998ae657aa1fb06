"""
Abstract graph contract.

This module defines the operations every undirected string-labeled graph in
mapgraph supports, independent of how adjacency is stored.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Iterator, Set

from ..classes.edge import Edge


class Graph(ABC):
    """
    Undirected graph of string-labeled vertices.

    Implementations must keep the following invariants under every sequence
    of add_edge calls:
    - w is adjacent to v if and only if v is adjacent to w
    - edge_count() equals the number of distinct unordered pairs inserted
    - vertex_count() equals the number of distinct endpoint labels seen

    Vertices only come into existence as edge endpoints; nothing is ever
    removed.
    """

    @abstractmethod
    def has_edge(self, v: str, w: str) -> bool:
        """Return True if v and w are connected by an edge."""

    @abstractmethod
    def has_vertex(self, v: str) -> bool:
        """Return True if v has been an endpoint of an inserted edge."""

    @abstractmethod
    def add_edge(self, v: str, w: str) -> None:
        """Insert the undirected edge v-w if it is not already present."""

    @abstractmethod
    def vertices(self) -> Iterator[str]:
        """Return a fresh iterator over all vertex labels."""

    @abstractmethod
    def adjacent_to(self, v: str) -> Iterator[str]:
        """Return a fresh iterator over the neighbors of v."""

    @abstractmethod
    def vertex_count(self) -> int:
        """Return the number of vertices."""

    @abstractmethod
    def edge_count(self) -> int:
        """Return the number of edges."""

    @abstractmethod
    def degree(self, v: str) -> int:
        """Return the number of neighbors of v."""

    # ========================================================================
    # DERIVED OPERATIONS
    # ========================================================================

    def add_edges(self, pairs: Iterable[Iterable[str]]) -> None:
        """
        Insert every (v, w) pair from an iterable.

        Args:
            pairs: Iterable of two-element sequences or Edge objects
        """
        for v, w in pairs:
            self.add_edge(v, w)

    def edges(self) -> Iterator[Edge]:
        """
        Iterate over each distinct edge exactly once.

        Returns:
            Iterator of Edge objects, in vertex iteration order
        """
        seen: Set[str] = set()
        for v in self.vertices():
            for w in self.adjacent_to(v):
                if w not in seen:
                    yield Edge(v, w)
            seen.add(v)

    def __contains__(self, v) -> bool:
        return self.has_vertex(v)

    def __iter__(self) -> Iterator[str]:
        return self.vertices()

    def __len__(self) -> int:
        return self.vertex_count()

    def __eq__(self, other):
        if not isinstance(other, Graph):
            return NotImplemented
        if self.vertex_count() != other.vertex_count() or self.edge_count() != other.edge_count():
            return False
        return set(self.vertices()) == set(other.vertices()) and set(self.edges()) == set(other.edges())

    __hash__ = None

    def __str__(self) -> str:
        """
        Render one line per vertex: the label, a colon, then its neighbors.

        For diagnostics only; order follows the implementation's iteration.
        """
        lines = []
        for v in self.vertices():
            neighbors = "".join(f"{w} " for w in self.adjacent_to(v))
            lines.append(f"{v}: {neighbors}\n")
        return "".join(lines)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} vertices={self.vertex_count()} edges={self.edge_count()}>"
