"""Trie engine — the mutable prefix tree the step generator walks."""

from __future__ import annotations

from dataclasses import dataclass, field

from . import constants
from .step_types import VisualNode


class StaleAllocatorError(RuntimeError):
    """Raised when a trie is built on an allocator that was never reset."""


class NodeIdAllocator:
    """Hands out node ids in strict creation order, starting at ``node-0``."""

    def __init__(self):
        self._next = 0

    @property
    def issued(self) -> int:
        return self._next

    def next_id(self) -> str:
        node_id = f"{constants.NODE_ID_PREFIX}{self._next}"
        self._next += 1
        return node_id

    def reset(self) -> None:
        self._next = 0


@dataclass(eq=False)
class TrieNode:
    id: str
    char: str
    depth: int
    parent: TrieNode | None = field(default=None, repr=False)  # back-reference only
    children: dict[str, TrieNode] = field(default_factory=dict, repr=False)
    is_end: bool = False

    def path(self) -> list[TrieNode]:
        """Return the nodes from the root down to this node."""
        nodes: list[TrieNode] = []
        node: TrieNode | None = self
        while node is not None:
            nodes.append(node)
            node = node.parent
        return nodes[::-1]


class Trie:
    """Prefix tree over arbitrary single-character edge labels.

    Every node is owned by exactly one parent; there is no deletion, so a
    node lives as long as the trie does.
    """

    def __init__(self, allocator: NodeIdAllocator | None = None):
        self._allocator = allocator if allocator is not None else NodeIdAllocator()
        if self._allocator.issued:
            raise StaleAllocatorError(
                f"Node id allocator has already issued {self._allocator.issued} ids; "
                "call reset() before building a new trie"
            )
        self.root = TrieNode(id=self._allocator.next_id(), char="", depth=0)
        self._node_count = 1

    def create_child(self, node: TrieNode, char: str) -> TrieNode:
        """Create and attach a new child of *node* for *char*."""
        if char in node.children:
            raise ValueError(f"Node {node.id} already has a child for {char!r}")
        child = TrieNode(
            id=self._allocator.next_id(),
            char=char,
            depth=node.depth + 1,
            parent=node,
        )
        node.children[char] = child
        self._node_count += 1
        return child

    def insert(self, word: str) -> None:
        if not word:
            raise ValueError("Cannot insert an empty word")
        node = self.root
        for char in word:
            if char not in node.children:
                self.create_child(node, char)
            node = node.children[char]
        node.is_end = True

    def find_node(self, prefix: str) -> TrieNode | None:
        """Walk *prefix* from the root; None when an edge is missing."""
        node = self.root
        for char in prefix:
            child = node.children.get(char)
            if child is None:
                return None
            node = child
        return node

    def search(self, word: str) -> bool:
        node = self.find_node(word)
        return node is not None and node.is_end

    def starts_with(self, prefix: str) -> bool:
        return self.find_node(prefix) is not None

    def node_count(self) -> int:
        return self._node_count

    def to_visual_node(self) -> VisualNode:
        """Deep snapshot of the whole tree in current child order."""
        return _to_visual(self.root)


def _to_visual(root: TrieNode) -> VisualNode:
    # Post-order without recursion: words may be longer than the interpreter's
    # recursion limit.
    built: dict[str, VisualNode] = {}
    stack: list[tuple[TrieNode, bool]] = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if not expanded:
            stack.append((node, True))
            stack.extend((child, False) for child in node.children.values())
            continue
        built[node.id] = VisualNode(
            id=node.id,
            char=node.char or constants.ROOT_LABEL,
            is_end=node.is_end,
            depth=node.depth,
            children=tuple(built.pop(c.id) for c in node.children.values()),
        )
    return built[root.id]
