import numbers
from typing import Iterable, List, Set, Tuple

import bittensor as bt
import networkx as nx
import numpy as np
import numpy.typing as npt

from MaximalCliques.errors import InvalidArgument


class Graph:
    """
    Undirected simple graph over a fixed number of vertices `0..n-1`.

    The adjacency is kept as a symmetric boolean matrix with an all-false
    diagonal. The only mutation is `add_edge`; everything else is a pure read.
    """

    __slots__ = ("n", "adj", "strict")

    def __init__(self, n: int, strict: bool = True):
        """
        Args:
        - n (int): Number of vertices, must be non-negative.
        - strict (bool): If True, `add_edge` rejects out-of-range endpoints and
          self-loops with InvalidArgument. If False they are silently ignored.
        """
        if isinstance(n, bool) or not isinstance(n, numbers.Integral):
            raise InvalidArgument(f"Vertex count must be an integer, got {n!r}")
        if n < 0:
            raise InvalidArgument(f"Vertex count must be non-negative, got {n}")
        self.n = int(n)
        self.adj: npt.NDArray[np.bool_] = np.zeros((self.n, self.n), dtype=bool)
        self.strict = strict

    @staticmethod
    def from_edges(
        n: int, edges: Iterable[Tuple[int, int]], strict: bool = True
    ) -> "Graph":
        graph = Graph(n, strict=strict)
        for u, v in edges:
            graph.add_edge(u, v)
        return graph

    @staticmethod
    def from_adjacency_list(
        adjacency_list: List[List[int]], strict: bool = True
    ) -> "Graph":
        """
        Builds a graph from an adjacency list where `adjacency_list[u]` holds the
        neighbours of `u`. An edge listed from one side only is still added.
        """
        graph = Graph(len(adjacency_list), strict=strict)
        for u, neighbours in enumerate(adjacency_list):
            for v in neighbours:
                graph.add_edge(u, v)
        return graph

    @staticmethod
    def from_networkx(nx_graph: nx.Graph, strict: bool = True) -> "Graph":
        graph = Graph(nx_graph.number_of_nodes(), strict=strict)
        for u, v in nx_graph.edges():
            graph.add_edge(u, v)
        return graph

    def to_networkx(self) -> nx.Graph:
        nx_graph = nx.Graph()
        nx_graph.add_nodes_from(range(self.n))
        nx_graph.add_edges_from(self.edges())
        return nx_graph

    def _in_range(self, v) -> bool:
        return (
            isinstance(v, numbers.Integral)
            and not isinstance(v, bool)
            and 0 <= v < self.n
        )

    def _check_vertex(self, v):
        if not self._in_range(v):
            raise InvalidArgument(f"Vertex {v!r} out of range for n={self.n}")

    def add_edge(self, u: int, v: int):
        if not (self._in_range(u) and self._in_range(v)):
            if self.strict:
                raise InvalidArgument(f"Edge ({u},{v}) out of bounds for n={self.n}")
            bt.logging.debug(f"Ignoring edge ({u},{v}) out of bounds for n={self.n}")
            return
        if u == v:
            if self.strict:
                raise InvalidArgument(f"Self-loop on vertex {u} is not allowed")
            bt.logging.debug(f"Ignoring self-loop on vertex {u}")
            return
        self.adj[u, v] = True
        self.adj[v, u] = True

    def is_adjacent(self, u: int, v: int) -> bool:
        self._check_vertex(u)
        self._check_vertex(v)
        return bool(self.adj[u, v])

    def neighbors(self, v: int) -> Set[int]:
        self._check_vertex(v)
        return set(np.flatnonzero(self.adj[v]).tolist())

    def degree(self, v: int) -> int:
        self._check_vertex(v)
        return int(np.count_nonzero(self.adj[v]))

    def degrees(self) -> npt.NDArray[np.int64]:
        return np.count_nonzero(self.adj, axis=1).astype(np.int64)

    def edges(self) -> List[Tuple[int, int]]:
        us, vs = np.nonzero(np.triu(self.adj, k=1))
        return list(zip(us.tolist(), vs.tolist()))

    def number_of_edges(self) -> int:
        return int(np.count_nonzero(self.adj)) // 2

    @property
    def number_of_nodes(self) -> int:
        return self.n

    def __len__(self) -> int:
        return self.n

    def __repr__(self) -> str:
        return f"Graph(n={self.n}, edges={self.number_of_edges()})"
