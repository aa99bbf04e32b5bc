version = "0.1.0"


def _version_to_int(version_str: str) -> int:
    version_split = version_str.split(".")
    major = int(version_split[0])
    minor = int(version_split[1])
    patch = int(version_split[2])
    return (10000 * major) + (100 * minor) + patch


int_version = _version_to_int(version)

from MaximalCliques.errors import InvalidArgument  # noqa: E402
from MaximalCliques.graph.graph import Graph  # noqa: E402
from MaximalCliques.solver.bron_kerbosch import (  # noqa: E402
    CliqueEnumerator,
    find_maximal_cliques,
)

__all__ = [
    "CliqueEnumerator",
    "Graph",
    "InvalidArgument",
    "find_maximal_cliques",
    "int_version",
    "version",
]
