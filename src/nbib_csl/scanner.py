"""Merge indented continuation lines into the field they extend."""
from __future__ import annotations

from typing import Iterable, Iterator, List

from .errors import InvalidState, MalformedLine

SEPARATOR = "-"
SEPARATOR_INDEX = 4


def merge_continuations(lines: Iterable[str]) -> Iterator[str]:
    """Yield one logical line per field occurrence.

    ["AB  - Abstract first line", "      continued"] -> ["AB  - Abstract first line continued"]
    """
    pending: List[str] = []
    for line in lines:
        if len(line) <= SEPARATOR_INDEX:
            raise MalformedLine(line=line)
        if line[SEPARATOR_INDEX] == SEPARATOR:
            if pending:
                yield _flush(pending)
            pending = [line.strip()]
        elif pending:
            pending.append(line.strip())
        else:
            raise InvalidState(line=line)
    if pending:
        yield _flush(pending)


def _flush(pending: List[str]) -> str:
    if len(pending) == 1:
        return pending[0]
    return " ".join(pending)
