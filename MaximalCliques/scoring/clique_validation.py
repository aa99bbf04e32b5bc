import numbers
from collections import Counter
from typing import Dict, FrozenSet, Iterable, List, Set

import numpy as np

from MaximalCliques.graph.graph import Graph


def canonical(cliques: Iterable[Iterable[int]]) -> Set[FrozenSet[int]]:
    """
    Set-of-sets form used to compare clique collections independently of the
    order of cliques and of the vertices inside them.
    """
    return {frozenset(c) for c in cliques}


class CliqueValidator:
    def __init__(self, graph: Graph):
        """
        Initializes the validator.

        Args:
        - graph (Graph): The graph to validate cliques against.
        """
        self.graph = graph

    def is_clique(self, nodes: Iterable[int]) -> bool:
        """
        Returns True if the given nodes are distinct, in range and pairwise adjacent.
        """
        nodes = list(nodes)
        if not all(
            isinstance(v, numbers.Integral) and not isinstance(v, bool) for v in nodes
        ):
            return False
        node_set = set(nodes)
        if len(node_set) != len(nodes):
            return False
        if not node_set.issubset(range(self.graph.n)):
            return False
        idx = np.array(nodes, dtype=np.int64)
        sub = self.graph.adj[np.ix_(idx, idx)]
        # Every off-diagonal entry of the induced submatrix must be set.
        return int(np.count_nonzero(sub)) == len(nodes) * (len(nodes) - 1)

    def is_maximal_clique(self, nodes: Iterable[int]) -> bool:
        """
        Returns True if the given nodes form a clique that no other vertex extends.
        """
        nodes = list(nodes)
        # 0. Check if the node set is empty
        if len(nodes) == 0:
            return False

        # 1. Check duplicates, range and pairwise adjacency
        if not self.is_clique(nodes):
            return False

        # 2. Check if any other node is adjacent to every member
        idx = np.array(nodes, dtype=np.int64)
        common = np.all(self.graph.adj[idx], axis=0)
        return not bool(common.any())

    def validity(self, cliques: List[Iterable[int]]) -> np.ndarray:
        return np.array(
            [1 if self.is_maximal_clique(c) else 0 for c in cliques], dtype=np.int64
        )

    def duplicates(self, cliques: List[Iterable[int]]) -> List[tuple]:
        counts = Counter(tuple(sorted(c)) for c in cliques)
        return sorted(c for c, k in counts.items() if k > 1)

    def size_distribution(self, cliques: List[Iterable[int]]) -> Dict[int, int]:
        return dict(sorted(Counter(len(list(c)) for c in cliques).items()))

    def verify(self, cliques: List[Iterable[int]]) -> bool:
        """
        True if every clique is a valid maximal clique and none occurs twice.
        """
        cliques = [list(c) for c in cliques]
        if len(cliques) == 0:
            return True
        return bool(np.all(self.validity(cliques))) and not self.duplicates(cliques)
