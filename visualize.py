#!/usr/bin/env python3
"""Trie step visualizer — command-line front end.

Replays a list of trie operations and prints the generated algorithm steps,
as text or JSON.
"""
from __future__ import annotations

import argparse
import logging
import random
import sys

from trie_visualizer.api import (
    dump_steps,
    render_tree,
    steps_to_json,
    summarize_results,
)
from trie_visualizer.examples import EXAMPLE_DATASETS, random_operations
from trie_visualizer.operations import (
    format_operations,
    parse_operations,
    validate_operations,
)
from trie_visualizer.playback import Playback
from trie_visualizer.steps import generate_trace


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Trie (prefix tree) algorithm step visualizer")
    parser.add_argument("operations", nargs="?",
                        help='Operations, e.g. "insert apple, search app" '
                             'or a JSON call list')
    parser.add_argument("--example", "-e", type=int, default=None,
                        help=f"Use built-in example 1-{len(EXAMPLE_DATASETS)}")
    parser.add_argument("--random", "-r", type=int, default=None, metavar="COUNT",
                        help="Generate COUNT random operations")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for --random")
    parser.add_argument("--json", action="store_true",
                        help="Print the steps as JSON")
    parser.add_argument("--tree", action="store_true",
                        help="Print the trie snapshot under every step")
    parser.add_argument("--step", type=int, default=None,
                        help="Show only the step at this index")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")
    return parser


def _load_operations(args: argparse.Namespace, parser: argparse.ArgumentParser):
    """Return (operations, heading) for the requested input source."""
    if args.example is not None:
        if not 1 <= args.example <= len(EXAMPLE_DATASETS):
            parser.error(f"--example must be between 1 and {len(EXAMPLE_DATASETS)}")
        example = EXAMPLE_DATASETS[args.example - 1]
        return example.operations(), f"Example {args.example}: {example.name}"
    if args.random is not None:
        return random_operations(args.random, random.Random(args.seed)), "Random operations"
    if not args.operations:
        return EXAMPLE_DATASETS[0].operations(), "No operations provided. Using built-in example 1."
    operations = parse_operations(args.operations)
    validate_operations(operations)
    return operations, "Operations"


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        operations, heading = _load_operations(args, parser)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    trace = generate_trace(operations)
    if not args.json:
        print(heading)
        print(f"  {format_operations(operations)}\n")

    if args.step is not None:
        playback = Playback(trace.steps)
        step = playback.seek(args.step)
        if args.json:
            print(steps_to_json([step]))
        else:
            print(f"Step {playback.current_index + 1} / {playback.total_steps}")
            print(dump_steps([step]))
            print(render_tree(step.trie_snapshot))
        return 0

    if args.json:
        print(steps_to_json(trace.steps))
        return 0

    print("═══ Steps ═══")
    print(dump_steps(trace.steps, with_tree=args.tree))
    print()
    print("═══ Results ═══")
    print(summarize_results(operations))
    print()
    print(f"({trace.stats.steps} steps, {trace.stats.final_node_count} nodes)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
