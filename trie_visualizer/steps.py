"""Step generator — replays operations against a trie and records every
primitive action as an AlgorithmStep with a deep snapshot of the tree.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from .step_types import (
    AlgorithmStep,
    Annotation,
    AnnotationPosition,
    AnnotationType,
    GenerationStats,
    Operation,
    OperationType,
    StepAction,
    StepTrace,
)
from .trie import NodeIdAllocator, Trie, TrieNode

logger = logging.getLogger(__name__)


class StepGenerationError(RuntimeError):
    """Raised when the replayed steps disagree with the engine's own answer."""


class _StepRecorder:
    """Appends steps to one flat sequence, snapshotting the trie each time."""

    def __init__(self, trie: Trie):
        self.trie = trie
        self.steps: list[AlgorithmStep] = []

    def emit(
        self,
        description: str,
        highlighted: list[str],
        variables: dict[str, Any],
        annotations: tuple[Annotation, ...] = (),
        current_char: str | None = None,
        current_char_index: int | None = None,
        action: StepAction | None = None,
    ) -> AlgorithmStep:
        step = AlgorithmStep(
            step_index=len(self.steps),
            description=description,
            highlighted_nodes=tuple(highlighted),
            trie_snapshot=self.trie.to_visual_node(),
            variables=dict(variables),
            annotations=annotations,
            current_char=current_char,
            current_char_index=current_char_index,
            action=action,
        )
        self.steps.append(step)
        return step


def _note(
    node: TrieNode,
    text: str,
    kind: AnnotationType,
    position: AnnotationPosition = AnnotationPosition.TOP,
) -> tuple[Annotation, ...]:
    return (Annotation(text=text, position=position, type=kind, node_id=node.id),)


def _emit_initialization(rec: _StepRecorder) -> None:
    root = rec.trie.root
    rec.emit(
        "Initialize the trie (prefix tree) and create the root node",
        [root.id],
        {},
        _note(root, "root", AnnotationType.INFO),
    )


def _insert_steps(rec: _StepRecorder, word: str) -> None:
    trie = rec.trie
    node = trie.root
    path = [node.id]

    rec.emit(
        f'Begin inserting word "{word}"',
        [node.id],
        {"word": word, "node": "root"},
        _note(node, f'insert "{word}"', AnnotationType.ACTION),
        current_char_index=-1,
    )

    for i, char in enumerate(word):
        child = node.children.get(char)
        if child is None:
            child = trie.create_child(node, char)
            rec.emit(
                f"Character '{char}' does not exist, create a new node",
                [*path, child.id],
                {"word": word, "char": char, "index": i, "action": "create"},
                _note(child, f"new node '{char}'", AnnotationType.ACTION),
                current_char=char,
                current_char_index=i,
                action=StepAction.CREATE_NODE,
            )
        else:
            rec.emit(
                f"Character '{char}' already exists, move to the child node",
                [*path, child.id],
                {"word": word, "char": char, "index": i, "action": "move"},
                _note(child, f"move to '{char}'", AnnotationType.ACTION),
                current_char=char,
                current_char_index=i,
                action=StepAction.MOVE_TO_CHILD,
            )
        node = child
        path.append(node.id)

    node.is_end = True
    rec.emit(
        f'Mark the node as the end of a word, "{word}" inserted',
        path,
        {"word": word, "isEnd": True},
        _note(node, "end of word ✓", AnnotationType.RESULT),
        action=StepAction.MARK_END,
    )


def _query_steps(rec: _StepRecorder, word: str, prefix_only: bool) -> bool:
    """Emit the steps of a search (or startsWith) walk and return its outcome.

    Stops at the first missing edge with a not-found step followed by a
    return-false step.
    """
    key = "prefix" if prefix_only else "word"
    label = f'prefix "{word}"' if prefix_only else f'"{word}"'
    node = rec.trie.root
    path = [node.id]

    rec.emit(
        f'Begin searching for {key} "{word}"',
        [node.id],
        {key: word, "node": "root"},
        _note(node, f"search {label}", AnnotationType.ACTION),
    )

    for i, char in enumerate(word):
        child = node.children.get(char)
        if child is None:
            miss = "prefix does not exist" if prefix_only else "search failed"
            rec.emit(
                f"Character '{char}' does not exist, {miss}",
                path,
                {key: word, "char": char, "index": i, "found": False},
                _note(node, f"'{char}' not found ✗", AnnotationType.RESULT,
                      AnnotationPosition.RIGHT),
                current_char=char,
                current_char_index=i,
                action=StepAction.RETURN_RESULT,
            )
            where = "does not exist" if prefix_only else "is not in the trie"
            rec.emit(
                f'Return false, {key} "{word}" {where}',
                path,
                {key: word, "result": False},
                action=StepAction.RETURN_RESULT,
            )
            return False

        rec.emit(
            f"Found character '{char}', move to the child node",
            [*path, child.id],
            {key: word, "char": char, "index": i},
            _note(child, f"found '{char}'", AnnotationType.ACTION),
            current_char=char,
            current_char_index=i,
            action=StepAction.MOVE_TO_CHILD,
        )
        node = child
        path.append(node.id)

    if prefix_only:
        rec.emit(
            f'Prefix "{word}" exists, return true',
            path,
            {key: word, "result": True},
            _note(node, "prefix exists ✓", AnnotationType.RESULT),
            action=StepAction.RETURN_RESULT,
        )
        return True

    is_end = node.is_end
    rec.emit(
        "Node is marked as the end of a word, search succeeded, return true"
        if is_end
        else "Node is not marked as the end of a word, search failed, return false",
        path,
        {key: word, "isEnd": is_end, "result": is_end},
        _note(node, "end of word ✓" if is_end else "not end of word ✗",
              AnnotationType.RESULT),
        action=StepAction.CHECK_END,
    )
    return is_end


def _record_result(op: Operation, emitted: bool, result: bool) -> None:
    if emitted != result:
        raise StepGenerationError(
            f"{op} replayed as {emitted} but the trie answered {result}"
        )
    op.result = result


def generate_trace(
    operations: Iterable[Operation],
    allocator: NodeIdAllocator | None = None,
) -> StepTrace:
    """Replay *operations* on a fresh trie and record every step.

    Resets *allocator* (or creates one) so node ids start at ``node-0``,
    then processes operations strictly in order. The result of each search
    and startsWith is written back onto its Operation.

    Args:
        operations: Ordered operations, already validated upstream.
        allocator: Optional id allocator shared with the caller.

    Returns:
        StepTrace with the full step sequence and generation metrics.
    """
    allocator = allocator if allocator is not None else NodeIdAllocator()
    allocator.reset()
    trie = Trie(allocator)
    rec = _StepRecorder(trie)
    stats = GenerationStats()

    _emit_initialization(rec)

    for op in operations:
        before = len(rec.steps)
        if op.type == OperationType.INSERT:
            _insert_steps(rec, op.word)
            stats.inserts += 1
        elif op.type == OperationType.SEARCH:
            emitted = _query_steps(rec, op.word, prefix_only=False)
            _record_result(op, emitted, trie.search(op.word))
            stats.searches += 1
        elif op.type == OperationType.STARTS_WITH:
            emitted = _query_steps(rec, op.word, prefix_only=True)
            _record_result(op, emitted, trie.starts_with(op.word))
            stats.prefix_queries += 1
        else:
            raise ValueError(f"Unknown operation type: {op.type}")
        stats.operations += 1
        logger.debug("%s emitted %d steps", op, len(rec.steps) - before)

    stats.steps = len(rec.steps)
    stats.final_node_count = trie.node_count()
    stats.nodes_created = trie.node_count() - 1

    logger.info(
        "Generated %d steps for %d operations (%d nodes)",
        stats.steps,
        stats.operations,
        stats.final_node_count,
    )
    return StepTrace(steps=tuple(rec.steps), stats=stats)


def generate_steps(
    operations: Iterable[Operation],
    allocator: NodeIdAllocator | None = None,
) -> list[AlgorithmStep]:
    """Replay *operations* and return the flat step sequence."""
    return list(generate_trace(operations, allocator).steps)
