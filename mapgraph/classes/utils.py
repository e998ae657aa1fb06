"""
Utility functions for mapgraph.

This module converts graphs into numpy arrays for consumers that work on
indexed representations (adjacency matrices, degree vectors).
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from ..core.graph import Graph

logger = logging.getLogger(__name__)


def vertex_order(graph: Graph, order: Optional[Sequence[str]] = None) -> List[str]:
    """
    Resolve the row order used by the array exports.

    Args:
        graph: Graph to index
        order: Optional explicit order; must list every vertex exactly once

    Returns:
        List of vertex labels, sorted when no order is given

    Raises:
        ValueError: If order is not a permutation of the graph's vertices
    """
    if order is None:
        return sorted(graph.vertices())

    labels = list(order)
    if len(labels) != len(set(labels)):
        raise ValueError("Vertex order contains duplicate labels")
    if set(labels) != set(graph.vertices()):
        raise ValueError("Vertex order must list every vertex in the graph exactly once")
    return labels


def adjacency_matrix(graph: Graph, order: Optional[Sequence[str]] = None,
                     dtype=np.int8) -> Tuple[List[str], np.ndarray]:
    """
    Build the dense adjacency matrix of a graph.

    Args:
        graph: Graph to convert
        order: Optional vertex order for rows and columns
        dtype: numpy dtype of the matrix

    Returns:
        Tuple of (labels, matrix) where matrix[i, j] is 1 when labels[i] and
        labels[j] are adjacent. The matrix is symmetric with a zero diagonal.
    """
    labels = vertex_order(graph, order)
    index: Dict[str, int] = {label: i for i, label in enumerate(labels)}

    matrix = np.zeros((len(labels), len(labels)), dtype=dtype)
    for edge in graph.edges():
        i, j = index[edge.v], index[edge.w]
        matrix[i, j] = 1
        matrix[j, i] = 1

    logger.debug(f"Built {len(labels)}x{len(labels)} adjacency matrix")
    return labels, matrix


def degree_array(graph: Graph, order: Optional[Sequence[str]] = None) -> np.ndarray:
    """
    Return vertex degrees as an integer array.

    Args:
        graph: Graph to read
        order: Optional vertex order, see vertex_order

    Returns:
        1-D numpy array aligned with vertex_order(graph, order)
    """
    labels = vertex_order(graph, order)
    return np.array([graph.degree(label) for label in labels], dtype=np.int64)
