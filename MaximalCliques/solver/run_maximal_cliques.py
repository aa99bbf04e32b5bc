import json
import time
from typing import List, Optional, Tuple

import bittensor as bt

from MaximalCliques.graph.graph import Graph
from MaximalCliques.graph.model import CliqueResult, GraphPayload
from MaximalCliques.solver.bron_kerbosch import CliqueEnumerator
from MaximalCliques.utils.config import config


def sample_graph() -> Graph:
    # 5-cycle 0-1-2-3-4-0
    return Graph.from_edges(5, [(0, 1), (1, 2), (2, 3), (3, 4), (4, 0)])


def load_edge_list(path: str) -> Tuple[int, List[Tuple[int, int]]]:
    edges = []
    n = 0
    with open(path, "r") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            parts = line.replace(",", " ").split()
            if len(parts) < 2:
                continue
            u, v = int(parts[0]), int(parts[1])
            edges.append((u, v))
            n = max(n, u + 1, v + 1)
    return n, edges


def load_graph_payload(path: str) -> GraphPayload:
    with open(path, "r") as f:
        return GraphPayload.model_validate(json.load(f))


def solve_maximal_cliques(
    graph: Graph, time_budget_sec: Optional[float] = None, enum_cap: Optional[int] = None
) -> CliqueResult:
    t0 = time.perf_counter()
    cliques, complete, expanded = CliqueEnumerator(graph).enumerate_with_budget(
        time_budget=time_budget_sec, cap=enum_cap
    )
    return CliqueResult.from_cliques(
        graph.n,
        cliques,
        complete=complete,
        runtime_sec=time.perf_counter() - t0,
        expanded_nodes=expanded,
    )


def build_graph(cfg) -> Graph:
    strict = not cfg.lenient
    if cfg.graph:
        bt.logging.info(f"Loading graph payload from {cfg.graph}")
        return load_graph_payload(cfg.graph).to_graph(strict=strict)
    if cfg.edges:
        bt.logging.info(f"Loading edge list from {cfg.edges}")
        n, edges = load_edge_list(cfg.edges)
        if cfg.nodes is not None:
            n = cfg.nodes
        return Graph.from_edges(n, edges, strict=strict)
    bt.logging.info("No input given, running on the sample 5-cycle graph")
    return sample_graph()


def main(args: Optional[List[str]] = None):
    cfg = config(args)
    bt.logging.set_config(config=cfg.logging)
    graph = build_graph(cfg)
    bt.logging.info(f"Loaded {graph}")
    result = solve_maximal_cliques(graph, time_budget_sec=cfg.time, enum_cap=cfg.enum_cap)
    bt.logging.info(
        f"Found {result.number_of_cliques} maximal cliques in {result.runtime_sec:.3f}s"
    )
    print(json.dumps(result.model_dump(), indent=2))
    return result


if __name__ == "__main__":
    main()
