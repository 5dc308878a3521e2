"""Built-in example datasets and random operation lists."""

from __future__ import annotations

import random
import string
from dataclasses import dataclass

from . import constants
from .step_types import Operation, OperationType


@dataclass(frozen=True)
class ExampleData:
    name: str
    calls: tuple[tuple[OperationType, str], ...]

    def operations(self) -> list[Operation]:
        """Fresh Operation records; the generator writes results onto them."""
        return [Operation(type=t, word=w) for t, w in self.calls]


_I, _S, _P = OperationType.INSERT, OperationType.SEARCH, OperationType.STARTS_WITH

EXAMPLE_DATASETS: tuple[ExampleData, ...] = (
    ExampleData(
        "apple & app",
        ((_I, "apple"), (_S, "apple"), (_S, "app"), (_P, "app"), (_I, "app"), (_S, "app")),
    ),
    ExampleData(
        "hello & world",
        ((_I, "hello"), (_I, "world"), (_S, "hello"), (_S, "world"), (_P, "hel"), (_P, "wor")),
    ),
    ExampleData(
        "prefix properties",
        ((_I, "cat"), (_I, "car"), (_I, "card"), (_S, "cat"), (_S, "ca"), (_P, "ca")),
    ),
    ExampleData(
        "single characters",
        (
            (_I, "a"), (_I, "ab"), (_I, "abc"),
            (_S, "a"), (_S, "ab"), (_S, "abc"), (_S, "abcd"),
        ),
    ),
)


def _random_word(rng: random.Random, bounds: tuple[int, int]) -> str:
    length = rng.randint(*bounds)
    return "".join(rng.choice(string.ascii_lowercase) for _ in range(length))


def random_operations(
    count: int = constants.DEFAULT_RANDOM_COUNT,
    rng: random.Random | None = None,
) -> list[Operation]:
    """Build a random operation list that starts with a few inserts.

    Roughly 40% of the operations (at least two) are inserts; the rest are
    queries, half of which reuse an inserted word (a strict prefix of it for
    startsWith) so that some lookups succeed.
    """
    if count < 1:
        raise ValueError(f"count must be positive, got {count}")
    rng = rng or random.Random()
    insert_count = max(2, int(count * 0.4))

    inserted = [_random_word(rng, constants.RANDOM_INSERT_WORD_LENGTH) for _ in range(insert_count)]
    operations = [Operation(type=_I, word=w) for w in inserted]

    for _ in range(count - insert_count):
        op_type = _S if rng.random() > 0.5 else _P
        if rng.random() > 0.5:
            base = rng.choice(inserted)
            if op_type == _P and len(base) > 1:
                word = base[: rng.randint(1, len(base) - 1)]
            else:
                word = base
        else:
            word = _random_word(rng, constants.RANDOM_QUERY_WORD_LENGTH)
        operations.append(Operation(type=op_type, word=word))
    return operations
