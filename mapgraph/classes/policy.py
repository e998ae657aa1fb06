"""
Configuration enums for graph behavior.
"""

from enum import Enum


class UnknownVertexPolicy(Enum):
    """
    How vertex queries treat a label that is not in the graph.

    RAISE: has_edge and adjacent_to raise VertexNotFoundError, degree is 0.
    TOTAL: has_edge is False, adjacent_to is empty, degree is 0.
    STRICT: has_edge, adjacent_to and degree all raise VertexNotFoundError.
    """
    RAISE = "raise"
    TOTAL = "total"
    STRICT = "strict"
