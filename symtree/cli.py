"""Command line interface for symtree."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import dotfile, trace
from .materializer import GraphConsistencyError
from .steps import StepContractError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="symtree", description="Symbolic execution tree visualizer")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser("render", help="Materialize a JSONL step trace into a DOT graph")
    render_parser.add_argument("trace", type=Path, help="Path to the JSONL step trace")
    render_parser.add_argument("--output", "-o", type=Path, default=Path("tree.dot"), help="Output DOT path")
    render_parser.add_argument("--graph-name", default=dotfile.DEFAULT_GRAPH_NAME, help="Name of the emitted digraph")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "render":
        try:
            records = trace.load_trace(args.trace)
            materializer, _ = trace.replay(records)
        except (trace.TraceFormatError, StepContractError, GraphConsistencyError) as exc:
            print(f"[-] {args.trace}: {exc}", file=sys.stderr)
            return 1
        dotfile.write_dot(materializer.graph, args.output, name=args.graph_name)
        print(f"[+] tree written to {args.output}")
        return 0

    parser.error("unknown command")
    return 1


if __name__ == "__main__":
    sys.exit(main())
