"""Trie step visualizer package."""

from .steps import generate_steps, generate_trace  # noqa: F401
from .trie import Trie, NodeIdAllocator  # noqa: F401
from .step_types import (  # noqa: F401
    AlgorithmStep,
    Operation,
    OperationType,
    StepAction,
    VisualNode,
)
