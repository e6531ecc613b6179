import pytest

from nbib_csl.errors import InvalidState, MalformedLine
from nbib_csl.scanner import merge_continuations


def test_merges_continuation_lines(sample_record):
    merged = list(merge_continuations(sample_record))

    assert len(merged) == 7
    assert merged[2] == (
        "AB  - This is the abstract's first line and this is its second line; with conclusion."
    )
    assert merged[0] == "PMID- 12345"
    assert merged[-1] == "AU  - Gregory CT"


def test_single_lines_are_trimmed():
    assert list(merge_continuations(["TI  - Title   "])) == ["TI  - Title"]


def test_merging_is_idempotent(sample_record):
    once = list(merge_continuations(sample_record))
    assert list(merge_continuations(once)) == once


def test_empty_input_yields_nothing():
    assert list(merge_continuations([])) == []


def test_trailing_multiline_field_is_flushed():
    lines = ["TI  - A title", "      spanning lines"]
    assert list(merge_continuations(lines)) == ["TI  - A title spanning lines"]


@pytest.mark.parametrize("line", ["", "AB", "AB -"])
def test_short_line_is_malformed(line):
    with pytest.raises(MalformedLine):
        list(merge_continuations(["PMID- 1", line]))


def test_continuation_without_field_is_invalid():
    with pytest.raises(InvalidState) as excinfo:
        list(merge_continuations(["      orphan continuation"]))
    assert excinfo.value.code == "INVALID_STATE"


def test_scanner_is_lazy():
    merged = merge_continuations(["PMID- 1", "TI  - Title", "oops"])
    assert next(merged) == "PMID- 1"
    with pytest.raises(MalformedLine):
        list(merged)
