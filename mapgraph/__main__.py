"""
Print the adjacency of a graph read from a delimited text file.

    python -m mapgraph tinyGraph.txt --delimiter " " --copy
"""

import argparse
import logging
import sys
from typing import List, Optional

from .core.mapgraph import MapGraph
from .exceptions import GraphError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mapgraph", description="Load an undirected graph and print its adjacency")
    parser.add_argument("filename", help="Path to the delimited graph file")
    parser.add_argument("-d", "--delimiter", default=None,
                        help="Field delimiter (default: runs of whitespace)")
    parser.add_argument("--copy", action="store_true", help="Also print a copy of the loaded graph")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def run(argv: List[str]) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.delimiter == "":
        parser.error("delimiter must not be empty")
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")

    try:
        graph = MapGraph.from_file(args.filename, args.delimiter)
    except GraphError as exc:
        print(f"mapgraph: {exc}", file=sys.stderr)
        return 1

    print(graph)
    if args.copy:
        print(graph.copy())
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    sys.exit(run(sys.argv[1:] if argv is None else argv))


if __name__ == "__main__":
    main()
