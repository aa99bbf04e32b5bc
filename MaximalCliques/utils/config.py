import argparse
from typing import List, Optional

import bittensor as bt


def add_args(parser: argparse.ArgumentParser):
    """
    Adds the maximal clique runner arguments to the parser.
    """
    parser.add_argument(
        "--edges",
        type=str,
        default=None,
        help="Path to edge list file: each line 'u v' or 'u,v' (0-indexed).",
    )
    parser.add_argument(
        "--graph",
        type=str,
        default=None,
        help="Path to a JSON file with 'number_of_nodes' and 'adjacency_list'.",
    )
    parser.add_argument(
        "--nodes",
        type=int,
        default=None,
        help="Number of vertices for --edges input (default: max vertex id + 1).",
    )
    parser.add_argument(
        "--time",
        type=float,
        default=None,
        help="Time budget in seconds (default: unlimited).",
    )
    parser.add_argument(
        "--enum-cap",
        type=int,
        default=None,
        help="Optional cap on number of maximal cliques to enumerate.",
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Silently ignore out-of-range edges and self-loops instead of failing.",
    )
    bt.logging.add_args(parser)


def config(args: Optional[List[str]] = None) -> "bt.Config":
    parser = argparse.ArgumentParser(
        description="Enumerate all maximal cliques (pivoted Bron-Kerbosch)."
    )
    add_args(parser)
    return bt.config(parser, args=args)
