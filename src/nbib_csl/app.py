"""High-level orchestrator for nbib to CSL-JSON conversion."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List

from .assembler import assemble
from .config import ConverterConfig
from .errors import NbibError
from .exporters import to_json
from .logging_utils import get_logger
from .models import CitationRecord, ConversionIssue, ConversionResult
from .parsers import CitationBlock, NbibReader, split_blocks
from .reducer import reduce_names
from .report import render_report
from .scanner import merge_continuations
from .tags import map_fields

logger = get_logger("app")


class NbibConverterApp:
    """Coordinates block splitting, conversion and export of citations."""

    def __init__(self, strict: bool = False, indent: int = 2, reader: NbibReader | None = None):
        self.strict = strict
        self.indent = indent
        self.reader = reader or NbibReader()

    @classmethod
    def from_config(cls, config: ConverterConfig) -> "NbibConverterApp":
        return cls(strict=config.strict, indent=config.indent)

    @staticmethod
    def convert_block(lines: Iterable[str]) -> CitationRecord:
        """Run one citation block through the whole pipeline.

        Raises the first structural error met; nothing of the block is kept then.
        """
        merged = merge_continuations(lines)
        fields = map_fields(merged)
        return assemble(reduce_names(fields))

    def iter_records(
        self, lines: Iterable[str], issues: List[ConversionIssue] | None = None
    ) -> Iterator[CitationRecord]:
        """Lazily convert every block of ``lines``.

        In strict mode the first failing block aborts the stream. Otherwise the
        block is skipped and, when ``issues`` is given, recorded there.
        """
        return self._convert_blocks(split_blocks(lines), issues)

    def convert_lines(self, lines: Iterable[str]) -> ConversionResult:
        result = ConversionResult()
        for record in self._convert_blocks(_counting(split_blocks(lines), result), result.issues):
            result.records.append(record)
        logger.info("Converted %d of %d citation blocks", len(result.records), result.blocks)
        return result

    def convert_text(self, text: str) -> ConversionResult:
        return self.convert_lines(text.splitlines())

    def convert_file(self, file_path: str | Path) -> ConversionResult:
        """Convert an nbib file (or ``-`` for stdin)."""
        return self.convert_lines(self.reader.iter_lines(file_path))

    def to_json(self, result: ConversionResult) -> str:
        return to_json(result.records, indent=self.indent)

    def conversion_report(self, text: str) -> str:
        return render_report(self.convert_text(text))

    def _convert_blocks(
        self, blocks: Iterable[CitationBlock], issues: List[ConversionIssue] | None
    ) -> Iterator[CitationRecord]:
        for block in blocks:
            try:
                record = self.convert_block(block.lines)
            except NbibError as exc:
                exc.block = block.index
                if self.strict:
                    raise
                logger.warning(
                    "Skipping block %d (line %d): %s", block.index, block.start_line, exc.message
                )
                if issues is not None:
                    issues.append(self._issue_for(block, exc))
                continue
            logger.debug("Converted block %d into record %s", block.index, record.identifier)
            yield record

    @staticmethod
    def _issue_for(block: CitationBlock, exc: NbibError) -> ConversionIssue:
        message = exc.message
        if exc.line is not None:
            message = f"{message} Offending line: {exc.line.strip()!r}"
        return ConversionIssue(
            code=exc.code,
            message=message,
            block=block.index,
            context=block.context,
        )


def _counting(blocks: Iterable[CitationBlock], result: ConversionResult) -> Iterator[CitationBlock]:
    for block in blocks:
        result.blocks += 1
        yield block
