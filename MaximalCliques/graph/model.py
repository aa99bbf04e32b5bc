from typing import FrozenSet, Iterable

from pydantic import BaseModel, Field, model_validator

from MaximalCliques.graph.graph import Graph


class GraphPayload(BaseModel):
    uuid: str = ""
    label: str = ""
    number_of_nodes: int = Field(ge=0)
    adjacency_list: list[list[int]]

    @model_validator(mode="after")
    def check_adjacency_length(self) -> "GraphPayload":
        if len(self.adjacency_list) != self.number_of_nodes:
            raise ValueError(
                f"adjacency_list has {len(self.adjacency_list)} rows, "
                f"expected number_of_nodes={self.number_of_nodes}"
            )
        return self

    @classmethod
    def from_graph(cls, graph: Graph, uuid: str = "", label: str = "") -> "GraphPayload":
        return cls(
            uuid=uuid,
            label=label,
            number_of_nodes=graph.n,
            adjacency_list=[sorted(graph.neighbors(v)) for v in range(graph.n)],
        )

    def to_graph(self, strict: bool = True) -> Graph:
        return Graph.from_adjacency_list(self.adjacency_list, strict=strict)


class CliqueResult(BaseModel):
    number_of_nodes: int
    number_of_cliques: int
    cliques: list[list[int]]
    complete: bool = True
    runtime_sec: float = 0.0
    expanded_nodes: int = 0

    @classmethod
    def from_cliques(
        cls, number_of_nodes: int, cliques: Iterable[FrozenSet[int]], **kwargs
    ) -> "CliqueResult":
        ordered = sorted(sorted(c) for c in cliques)
        return cls(
            number_of_nodes=number_of_nodes,
            number_of_cliques=len(ordered),
            cliques=ordered,
            **kwargs,
        )
