import math
import time
from typing import FrozenSet, List, Optional, Tuple

import bittensor as bt
import numpy as np

from MaximalCliques.errors import InvalidArgument
from MaximalCliques.graph.graph import Graph


def _lsb_index(x: int) -> int:
    return (x & -x).bit_length() - 1


def _bits_to_set(bits: int) -> FrozenSet[int]:
    out = []
    x = bits
    while x:
        out.append(_lsb_index(x))
        x &= x - 1
    return frozenset(out)


class CliqueEnumerator:
    """
    Enumerates all maximal cliques of a graph with the pivoted Bron-Kerbosch
    algorithm.

    Vertex sets R, P and X are Python ints used as bitsets. The adjacency of
    the graph is copied into per-vertex neighbour masks when the enumerator is
    created, so later calls to `Graph.add_edge` do not affect it.
    """

    def __init__(self, G: Graph):
        self.G = G
        self.n = G.n
        self.adj = [
            sum(1 << u for u in np.flatnonzero(G.adj[v]).tolist())
            for v in range(self.n)
        ]
        self.deg = [mask.bit_count() for mask in self.adj]
        self.start_time = 0.0
        self.deadline = math.inf
        self.cap: Optional[int] = None
        self.nodes_expanded = 0

    def _time_ok(self) -> bool:
        return time.perf_counter() < self.deadline

    def _choose_pivot(self, P_bits: int) -> int:
        # Highest degree in the whole graph, lowest vertex id on ties.
        pivot, best = -1, -1
        tmp = P_bits
        while tmp:
            v = _lsb_index(tmp)
            if self.deg[v] > best:
                pivot, best = v, self.deg[v]
            tmp &= tmp - 1
        return pivot

    def _enter(self, R_bits: int, P_bits: int, X_bits: int, out: list):
        """
        Visits one search node. Emits R when it is maximal and returns the
        frame [R, P, X, branch] to iterate, or None for a leaf.
        """
        if not self._time_ok():
            raise TimeoutError
        self.nodes_expanded += 1
        if P_bits == 0:
            if X_bits == 0:
                out.append(_bits_to_set(R_bits))
                if self.cap is not None and len(out) >= self.cap:
                    raise TimeoutError
            return None
        u = self._choose_pivot(P_bits)
        return [R_bits, P_bits, X_bits, P_bits & ~self.adj[u]]

    def _expand(self, R_bits: int, P_bits: int, X_bits: int, out: list):
        # Explicit stack: depth grows with the clique size, not the call stack.
        stack = []
        frame = self._enter(R_bits, P_bits, X_bits, out)
        if frame is not None:
            stack.append(frame)
        while stack:
            frame = stack[-1]
            R_bits, P_bits, X_bits, branch = frame
            if branch == 0:
                stack.pop()
                continue
            v = _lsb_index(branch)
            v_bit = 1 << v
            child = self._enter(
                R_bits | v_bit, P_bits & self.adj[v], X_bits & self.adj[v], out
            )
            # The child frame is drained before this frame resumes.
            frame[1] = P_bits & ~v_bit
            frame[2] = X_bits | v_bit
            frame[3] = branch & (branch - 1)
            if child is not None:
                stack.append(child)

    def enumerate_with_budget(
        self, time_budget: Optional[float] = None, cap: Optional[int] = None
    ) -> Tuple[List[FrozenSet[int]], bool, int]:
        """
        Runs the enumeration, stopping early once `time_budget` seconds have
        elapsed or `cap` cliques have been found.

        Returns:
            Tuple[List[FrozenSet[int]], bool, int]: the cliques found, whether the
            enumeration ran to completion, and the number of expanded nodes.
        """
        if cap is not None and cap < 1:
            raise InvalidArgument(f"cap must be a positive integer, got {cap}")
        self.nodes_expanded = 0
        self.start_time = time.perf_counter()
        self.deadline = (
            math.inf if time_budget is None else self.start_time + time_budget
        )
        self.cap = cap
        out: List[FrozenSet[int]] = []
        if self.n == 0:
            return out, True, 0
        try:
            P = (1 << self.n) - 1
            self._expand(0, P, 0, out)
            complete = True
        except TimeoutError:
            complete = False
        finally:
            self.deadline = math.inf
            self.cap = None
        bt.logging.debug(
            f"Enumerated {len(out)} maximal cliques on {self.n} vertices, "
            f"expanded {self.nodes_expanded} nodes in "
            f"{time.perf_counter() - self.start_time:.4f}s"
        )
        if not complete:
            bt.logging.warning(
                f"Enumeration stopped early after {len(out)} cliques "
                f"(time_budget={time_budget}, cap={cap})"
            )
        return out, complete, self.nodes_expanded

    def enumerate(self) -> List[FrozenSet[int]]:
        cliques, _, _ = self.enumerate_with_budget()
        return cliques


def find_maximal_cliques(graph: Graph) -> List[FrozenSet[int]]:
    """
    Returns every maximal clique of `graph` exactly once. The order of the
    cliques is unspecified; compare results as sets of sets.
    """
    return CliqueEnumerator(graph).enumerate()
