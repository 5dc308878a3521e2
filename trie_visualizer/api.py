"""Composable API functions for the trie step visualizer.

Each function corresponds to a CLI workflow but is callable programmatically
without argparse.
"""

from __future__ import annotations

import json
import logging
from typing import Iterable, Sequence

from .operations import parse_operations, validate_operations
from .step_types import AlgorithmStep, Operation, OperationType, StepTrace, VisualNode
from .steps import generate_trace

logger = logging.getLogger(__name__)


def generate_from_text(text: str) -> tuple[list[Operation], StepTrace]:
    """Parse and validate an operation list, then generate its steps.

    Returns:
        The parsed operations (with results filled in) and the StepTrace.
    """
    operations = parse_operations(text)
    validate_operations(operations)
    logger.info("Generating steps for %d parsed operations", len(operations))
    return operations, generate_trace(operations)


def render_tree(snapshot: VisualNode) -> str:
    """Indented text rendering of a snapshot; ``*`` marks word ends."""
    lines: list[str] = []
    stack: list[VisualNode] = [snapshot]
    while stack:
        node = stack.pop()
        marker = "*" if node.is_end else ""
        lines.append(f"{'  ' * node.depth}{node.char}{marker} [{node.id}]")
        stack.extend(reversed(node.children))
    return "\n".join(lines)


def _format_step(step: AlgorithmStep) -> str:
    action = step.action.value if step.action else "-"
    path = " > ".join(step.highlighted_nodes)
    return f"[{step.step_index:>3}] {action:<12} {step.description}  ({path})"


def dump_steps(steps: Iterable[AlgorithmStep], with_tree: bool = False) -> str:
    """Return a human-readable listing, one line per step."""
    lines: list[str] = []
    for step in steps:
        lines.append(_format_step(step))
        if with_tree:
            lines.append(render_tree(step.trie_snapshot))
            lines.append("")
    return "\n".join(lines)


def steps_to_json(steps: Iterable[AlgorithmStep], indent: int | None = 2) -> str:
    return json.dumps([s.to_dict() for s in steps], indent=indent, ensure_ascii=False)


def summarize_results(operations: Sequence[Operation]) -> str:
    """One line per operation, with the recorded result for queries."""
    lines: list[str] = []
    for op in operations:
        if op.type == OperationType.INSERT:
            lines.append(f"  {op}")
        else:
            lines.append(f"  {op} -> {str(op.result).lower()}")
    return "\n".join(lines)
