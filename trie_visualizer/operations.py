"""Operation input — parsing and validation of user-entered operation lists.

Two input forms are accepted:

* JSON call list: ``[["Trie"], ["insert", "apple"], ["search", "apple"]]``
  (the first entry is the constructor call and is skipped)
* simple text: ``insert apple, search apple, startsWith app``
"""

from __future__ import annotations

import json
import logging
import re
from typing import Iterable

from . import constants
from .step_types import Operation, OperationType

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(constants.WORD_PATTERN)
_SEPARATOR_RE = re.compile(r"[,\n]")

_METHODS: dict[str, OperationType] = {
    "insert": OperationType.INSERT,
    "search": OperationType.SEARCH,
    "startswith": OperationType.STARTS_WITH,
}

# JSON call lists name methods exactly as the Trie API spells them.
_JSON_METHODS: dict[str, OperationType] = {t.value: t for t in OperationType}


class OperationParseError(ValueError):
    pass


def is_valid_word(word: str) -> bool:
    return (
        bool(_WORD_RE.match(word))
        and constants.MIN_WORD_LENGTH <= len(word) <= constants.MAX_WORD_LENGTH
    )


def _parse_json(data: object) -> list[Operation]:
    if not isinstance(data, list) or len(data) < 2:
        raise OperationParseError(
            "Expected a JSON list of calls starting with the constructor, "
            f'e.g. [["{constants.CONSTRUCTOR_CALL}"], ["insert", "apple"]]'
        )
    operations: list[Operation] = []
    for call in data[1:]:
        if not isinstance(call, list) or len(call) < 2:
            continue
        method, arg = call[0], call[1]
        op_type = _JSON_METHODS.get(method) if isinstance(method, str) else None
        if op_type is not None and isinstance(arg, str):
            operations.append(Operation(type=op_type, word=arg))
    return operations


def _parse_simple(text: str) -> list[Operation]:
    operations: list[Operation] = []
    for chunk in _SEPARATOR_RE.split(text):
        parts = chunk.split()
        if len(parts) < 2:
            continue
        op_type = _METHODS.get(parts[0].lower())
        word = parts[1]
        if op_type is None or not _WORD_RE.match(word):
            logger.debug("Skipping unrecognised entry %r", chunk.strip())
            continue
        operations.append(Operation(type=op_type, word=word))
    return operations


def parse_operations(text: str) -> list[Operation]:
    """Parse *text* in either accepted form into Operation records.

    Raises:
        OperationParseError: if the input is blank or yields no operation.
    """
    if not text.strip():
        raise OperationParseError("No operations given")
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        operations = _parse_simple(text)
    else:
        operations = _parse_json(data)

    if not operations:
        raise OperationParseError(
            "Could not parse any operation; use: insert word, search word, "
            "startsWith prefix"
        )
    logger.debug("Parsed %d operations", len(operations))
    return operations


def validate_operations(operations: Iterable[Operation]) -> None:
    for op in operations:
        if not is_valid_word(op.word):
            raise OperationParseError(
                f'Word "{op.word}" is invalid: only lowercase letters, length '
                f"{constants.MIN_WORD_LENGTH}-{constants.MAX_WORD_LENGTH}"
            )


def format_operations(operations: Iterable[Operation]) -> str:
    return " → ".join(str(op) for op in operations)
