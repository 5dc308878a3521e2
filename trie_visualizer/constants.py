"""Named constants — eliminates magic strings across the codebase."""

from __future__ import annotations

NODE_ID_PREFIX = "node-"
ROOT_LABEL = "root"

SPEED_OPTIONS: tuple[float, ...] = (0.5, 0.75, 1, 1.25, 1.5, 2)
DEFAULT_SPEED = 1
BASE_INTERVAL_SECONDS = 1.0

WORD_PATTERN = r"^[a-z]+$"
MIN_WORD_LENGTH = 1
MAX_WORD_LENGTH = 2000

CONSTRUCTOR_CALL = "Trie"

DEFAULT_RANDOM_COUNT = 6
RANDOM_INSERT_WORD_LENGTH: tuple[int, int] = (2, 6)
RANDOM_QUERY_WORD_LENGTH: tuple[int, int] = (1, 5)
