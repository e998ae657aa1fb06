"""
Edge value type.

An edge is an unordered pair of distinct vertex labels. Two edges compare
equal regardless of the order their endpoints were given in.
"""

from typing import Iterator, Tuple

from ..exceptions import SelfLoopError


class Edge:
    """
    Immutable undirected edge between two distinct vertices.

    Attributes:
        v: First endpoint, as given
        w: Second endpoint, as given
    """

    __slots__ = ('v', 'w')

    def __init__(self, v: str, w: str):
        """
        Create an edge.

        Args:
            v: One endpoint
            w: The other endpoint

        Raises:
            SelfLoopError: If v and w are the same vertex
        """
        if v == w:
            raise SelfLoopError(v)
        object.__setattr__(self, 'v', v)
        object.__setattr__(self, 'w', w)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self.v, self.w))

    @property
    def endpoints(self) -> Tuple[str, str]:
        """Endpoints in a canonical (sorted) order."""
        return (self.v, self.w) if self.v <= self.w else (self.w, self.v)

    def other(self, vertex: str) -> str:
        """
        Return the endpoint opposite to vertex.

        Raises:
            ValueError: If vertex is not an endpoint of this edge
        """
        if vertex == self.v:
            return self.w
        if vertex == self.w:
            return self.v
        raise ValueError(f"{vertex!r} is not an endpoint of {self!r}")

    def __iter__(self) -> Iterator[str]:
        return iter((self.v, self.w))

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self.endpoints == other.endpoints

    def __hash__(self):
        return hash(frozenset((self.v, self.w)))

    def __repr__(self):
        return f"Edge({self.v!r}, {self.w!r})"

    def __str__(self):
        return f"{self.v}-{self.w}"
