"""
Graph store for graphpath.
- Undirected, positively weighted graph with generated vertex ids (A, B, C, ...)
- Vertices keep insertion order; the shortest-path engine breaks ties with it
- Edges keep insertion order; neighbour lists follow it
Usage:
    from graphpath.graph_store import Graph
    g = Graph()
    a, b = g.add_vertex(), g.add_vertex()
    g.add_edge(a, b, 4)
    g.neighbors(a)   # [('B', 4)]
"""

import logging
import numbers
from dataclasses import dataclass

logger = logging.getLogger(__name__)

ALPHABET_SIZE = 26


class GraphError(Exception):
    """Base class for graph store errors."""


class InvalidEdgeError(GraphError, ValueError):
    """Raised when an edge would connect a vertex to itself."""


class InvalidWeightError(GraphError, ValueError):
    """Raised when an edge weight is not a positive integer."""


class VertexNotFoundError(GraphError, KeyError):
    """Raised when a vertex id is not present in the graph."""


def vertex_label(index):
    """
    Label for the index-th generated vertex: 0 -> 'A', 25 -> 'Z', 26 -> 'AA'.
    """
    label = ""
    n = index + 1
    while n > 0:
        n, rem = divmod(n - 1, ALPHABET_SIZE)
        label = chr(ord('A') + rem) + label
    return label


@dataclass(frozen=True, eq=False)
class Edge:
    """Undirected weighted connection. Compared by identity."""
    u: str
    v: str
    weight: int

    def connects(self, a, b):
        return (self.u == a and self.v == b) or (self.u == b and self.v == a)

    def touches(self, vertex):
        return self.u == vertex or self.v == vertex

    def other(self, vertex):
        """Endpoint opposite to `vertex`."""
        if vertex == self.u:
            return self.v
        if vertex == self.v:
            return self.u
        raise VertexNotFoundError(vertex)


def _validate_weight(weight):
    if isinstance(weight, bool) or not isinstance(weight, numbers.Integral):
        raise InvalidWeightError(f"Edge weight must be an integer, got {weight!r}")
    if weight < 1:
        raise InvalidWeightError(f"Edge weight must be >= 1, got {weight}")
    return int(weight)


class Graph:
    """
    Owns the vertex and edge collections.

    Rejections that leave the graph unchanged (duplicate edge, removing
    something absent) are reported through the return value. Malformed
    input (self-loop, bad weight, unknown vertex) raises a GraphError.
    """

    def __init__(self):
        self._vertices = {}  # id -> None, ordered
        self._edges = []
        self._counter = 0

    # ----------------------
    # Mutation
    # ----------------------

    def add_vertex(self):
        """Create a vertex with the next generated id and return the id."""
        vid = vertex_label(self._counter)
        self._counter += 1
        self._vertices[vid] = None
        logger.debug("Vertex added: %s", vid)
        return vid

    def add_edge(self, u, v, weight):
        """
        Connect u and v.

        Returns:
            the new Edge, or None when u and v are already connected
        """
        if u == v:
            raise InvalidEdgeError(f"Cannot connect vertex {u} to itself")
        for vid in (u, v):
            if vid not in self._vertices:
                raise VertexNotFoundError(vid)
        weight = _validate_weight(weight)

        if self.find_edge(u, v) is not None:
            logger.warning("Edge already exists between %s and %s", u, v)
            return None

        edge = Edge(u, v, weight)
        self._edges.append(edge)
        logger.debug("Edge added: %s <-> %s (weight %d)", u, v, weight)
        return edge

    def remove_vertex(self, vid):
        """Remove a vertex and every edge touching it. False if absent."""
        if vid not in self._vertices:
            logger.debug("Vertex %s not found, nothing removed", vid)
            return False
        before = len(self._edges)
        self._edges = [e for e in self._edges if not e.touches(vid)]
        del self._vertices[vid]
        logger.debug("Vertex %s removed with %d edge(s)", vid, before - len(self._edges))
        return True

    def remove_edge(self, edge):
        """Remove this exact edge object. False if absent."""
        for i, e in enumerate(self._edges):
            if e is edge:
                del self._edges[i]
                logger.debug("Edge removed: %s <-> %s", edge.u, edge.v)
                return True
        return False

    def clear(self):
        """Drop every vertex and edge and restart ids at 'A'."""
        self._vertices = {}
        self._edges = []
        self._counter = 0
        logger.debug("Graph cleared")

    # ----------------------
    # Queries
    # ----------------------

    @property
    def vertices(self):
        return tuple(self._vertices)

    @property
    def edges(self):
        return tuple(self._edges)

    def __len__(self):
        return len(self._vertices)

    def __contains__(self, vid):
        return vid in self._vertices

    def __iter__(self):
        return iter(tuple(self._vertices))

    def has_vertex(self, vid):
        return vid in self._vertices

    def find_vertex(self, predicate):
        """First vertex id (enumeration order) matching predicate, else None."""
        for vid in self._vertices:
            if predicate(vid):
                return vid
        return None

    def find_edge(self, u, v):
        for e in self._edges:
            if e.connects(u, v):
                return e
        return None

    def has_edge(self, u, v):
        return self.find_edge(u, v) is not None

    def neighbors(self, vid):
        """
        Adjacent vertices of vid as (vertex, weight) pairs, in edge insertion order.
        """
        if vid not in self._vertices:
            raise VertexNotFoundError(vid)
        out = []
        for e in self._edges:
            if e.u == vid:
                out.append((e.v, e.weight))
            elif e.v == vid:
                out.append((e.u, e.weight))
        return out

    def degree(self, vid):
        return len(self.neighbors(vid))

    def path_edges(self, path):
        """Edges joining consecutive vertices of a path (for highlighting)."""
        edges = []
        for i in range(len(path) - 1):
            e = self.find_edge(path[i], path[i + 1])
            if e is not None:
                edges.append(e)
        return edges

    def __repr__(self):
        return f"Graph(vertices={len(self._vertices)}, edges={len(self._edges)})"
