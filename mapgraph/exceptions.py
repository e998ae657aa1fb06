"""
Custom exceptions for mapgraph.

Every error raised by the package derives from GraphError. Each subclass
also derives from the matching builtin so callers catching ValueError,
KeyError or OSError keep working.
"""

from typing import Optional


class GraphError(Exception):
    '''
    Top-level exception for mapgraph.
    '''
    pass


class SelfLoopError(GraphError, ValueError):
    '''
    Raised when an edge would connect a vertex to itself.
    '''

    def __init__(self, vertex: str):
        super().__init__(f"Vertex arguments cannot be the same: {vertex!r}")
        self.vertex = vertex


class VertexNotFoundError(GraphError, KeyError):
    '''
    Raised when a query names a vertex that is not in the graph.
    '''

    def __init__(self, vertex: str):
        super().__init__(vertex)
        self.vertex = vertex

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the whole message
        return f"Vertex not in graph: {self.vertex!r}"


class GraphLoadError(GraphError, OSError):
    '''
    Raised when a bulk-load source cannot be read.
    '''

    def __init__(self, message: str, filename: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.filename = filename

    def __str__(self) -> str:
        # OSError.__str__ would format errno and filename instead
        return self.message


class GraphFormatError(GraphError, ValueError):
    '''
    Raised when a bulk-load line cannot be applied to the graph.
    '''

    def __init__(self, message: str, lineno: int, line: str):
        super().__init__(f"line {lineno}: {message}")
        self.lineno = lineno
        self.line = line
