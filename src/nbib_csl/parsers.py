"""Reading nbib exports and splitting them into citation blocks."""
from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List


@dataclass
class CitationBlock:
    """Raw lines of one citation, with its position in the input."""

    index: int
    start_line: int
    lines: List[str]

    @property
    def context(self) -> str:
        return self.lines[0].strip() if self.lines else ""


def split_blocks(lines: Iterable[str]) -> Iterator[CitationBlock]:
    """Yield blank-line-delimited blocks; repeated blank lines yield nothing."""
    current: List[str] = []
    start = 0
    index = 0
    for number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            if current:
                yield CitationBlock(index=index, start_line=start, lines=current)
                index += 1
                current = []
            continue
        if not current:
            start = number
        current.append(line)
    if current:
        yield CitationBlock(index=index, start_line=start, lines=current)


class NbibReader:
    """Loads nbib text from files or standard input."""

    encoding = "utf-8-sig"

    def iter_lines(self, file_path: str | Path) -> Iterator[str]:
        """Stream lines without reading the whole file."""
        if str(file_path) == "-":
            yield from sys.stdin
            return
        with Path(file_path).open(encoding=self.encoding) as handle:
            yield from handle
