"""Step data types for trie operation replay (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterator, Mapping

from pydantic import BaseModel


class OperationType(str, Enum):
    INSERT = "insert"
    SEARCH = "search"
    STARTS_WITH = "startsWith"


class StepAction(str, Enum):
    MOVE_TO_CHILD = "moveToChild"
    CREATE_NODE = "createNode"
    MARK_END = "markEnd"
    CHECK_END = "checkEnd"
    RETURN_RESULT = "returnResult"


class AnnotationType(str, Enum):
    INFO = "info"
    ACTION = "action"
    RESULT = "result"
    VALUE = "value"


class AnnotationPosition(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


class Operation(BaseModel):
    """One user request against the trie.

    ``result`` stays ``None`` for inserts and is filled in by the step
    generator once a search or startsWith query has been replayed.
    """

    type: OperationType
    word: str
    result: bool | None = None

    def __str__(self) -> str:
        return f'{self.type.value}("{self.word}")'


@dataclass(frozen=True, eq=False)
class VisualNode:
    """Immutable, render-ready projection of a trie subtree.

    Children appear in the same order as in the live tree. Coordinates are
    assigned by whatever renders the snapshot. Comparison, hashing and export
    walk the tree with an explicit stack, so snapshots of words longer than
    the recursion limit behave like any other.
    """

    id: str
    char: str
    is_end: bool
    depth: int
    children: tuple[VisualNode, ...] = field(default=(), repr=False)

    def iter_nodes(self) -> Iterator[VisualNode]:
        """Yield this node and its descendants in depth-first pre-order."""
        stack: list[VisualNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def node_count(self) -> int:
        return sum(1 for _ in self.iter_nodes())

    def find(self, node_id: str) -> VisualNode | None:
        return next((n for n in self.iter_nodes() if n.id == node_id), None)

    def _signature(self) -> tuple:
        # Pre-order plus child counts fixes the shape uniquely.
        return tuple(
            (n.id, n.char, n.is_end, n.depth, len(n.children))
            for n in self.iter_nodes()
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VisualNode):
            return NotImplemented
        return self is other or self._signature() == other._signature()

    def __hash__(self) -> int:
        return hash(self._signature())

    def __repr__(self) -> str:
        return (
            f"VisualNode(id={self.id!r}, char={self.char!r}, is_end={self.is_end}, "
            f"depth={self.depth}, children={len(self.children)})"
        )

    def to_dict(self) -> dict:
        """Flat export: nodes in pre-order, each naming its parent and children.

        A flat list keeps the JSON nesting constant however deep the tree is.
        """
        nodes: list[dict[str, Any]] = []
        stack: list[tuple[VisualNode, str | None]] = [(self, None)]
        while stack:
            node, parent_id = stack.pop()
            nodes.append(
                {
                    "id": node.id,
                    "char": node.char,
                    "isEnd": node.is_end,
                    "depth": node.depth,
                    "parentId": parent_id,
                    "children": [c.id for c in node.children],
                }
            )
            stack.extend((c, node.id) for c in reversed(node.children))
        return {"rootId": self.id, "nodes": nodes}


@dataclass(frozen=True)
class Annotation:
    text: str
    position: AnnotationPosition = AnnotationPosition.TOP
    type: AnnotationType = AnnotationType.INFO
    node_id: str | None = None
    edge_id: str | None = None

    def to_dict(self) -> dict:
        d: dict[str, Any] = {
            "text": self.text,
            "position": self.position.value,
            "type": self.type.value,
        }
        if self.node_id is not None:
            d["nodeId"] = self.node_id
        if self.edge_id is not None:
            d["edgeId"] = self.edge_id
        return d


@dataclass(frozen=True)
class AlgorithmStep:
    """One atomic, replayable moment of an operation.

    ``trie_snapshot`` is the whole tree as it exists immediately after this
    step's action; ``variables`` is display-only state.
    """

    step_index: int
    description: str
    highlighted_nodes: tuple[str, ...]
    trie_snapshot: VisualNode
    variables: Mapping[str, Any] = field(default_factory=dict, hash=False)
    annotations: tuple[Annotation, ...] = ()
    current_char: str | None = None
    current_char_index: int | None = None
    action: StepAction | None = None

    def __post_init__(self):
        object.__setattr__(self, "variables", MappingProxyType(dict(self.variables)))

    def to_dict(self) -> dict:
        d: dict[str, Any] = {
            "stepIndex": self.step_index,
            "description": self.description,
            "highlightedNodes": list(self.highlighted_nodes),
            "variables": dict(self.variables),
            "trieSnapshot": self.trie_snapshot.to_dict(),
            "annotations": [a.to_dict() for a in self.annotations],
        }
        if self.current_char is not None:
            d["currentChar"] = self.current_char
        if self.current_char_index is not None:
            d["currentCharIndex"] = self.current_char_index
        if self.action is not None:
            d["action"] = self.action.value
        return d


@dataclass
class GenerationStats:
    """Returned generation metrics from generate_trace."""

    steps: int = 0
    operations: int = 0
    inserts: int = 0
    searches: int = 0
    prefix_queries: int = 0
    nodes_created: int = 0
    final_node_count: int = 0


@dataclass(frozen=True)
class StepTrace:
    """Complete step sequence of one generation pass plus its metrics."""

    steps: tuple[AlgorithmStep, ...] = ()
    stats: GenerationStats = field(default_factory=GenerationStats)
