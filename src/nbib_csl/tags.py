"""Mapping of MEDLINE/PubMed nbib tags onto CSL variables.

Reference: https://www.nlm.nih.gov/bsd/mms/medlineelements.html
CSL schema: https://github.com/citation-style-language/schema/blob/master/schemas/input/csl-data.json
"""
from __future__ import annotations

from typing import Callable, Dict, Iterable, Iterator, Optional, Tuple

from .errors import MalformedRecord
from .logging_utils import get_logger
from .models import (
    CSLField,
    DateField,
    DateParts,
    FieldVariant,
    Ignored,
    NameField,
    NameParts,
    OrdinaryField,
)
from .scanner import SEPARATOR, SEPARATOR_INDEX

logger = get_logger("tags")

MIN_RECORD_LENGTH = 7
VALUE_OFFSET = 6
JOURNAL_ARTICLE = "Journal Article"
DOI_SUFFIX = "[doi]"

# Plain renames: tag -> CSL ordinary variable
_ORDINARY_TAGS: Dict[str, str] = {
    "AB": "abstract",
    "TI": "title",
    "VI": "volume",
    "IP": "issue",
    "PG": "page",
    # MEDLINE uses ISO 639-2 three letter codes
    "LA": "language",
    "SI": "note",
    "TA": "container-title-short",
    "JT": "container-title",
}

_NAME_TAGS: Dict[str, str] = {
    "FAU": "author",
    "AU": "author",
    "FED": "editor",
    "ED": "editor",
}

# Stored raw; MEDLINE dates look like "2020 Mar 15"
_DATE_TAGS: Dict[str, str] = {
    "DP": "issued",
}


def split_name(key: str, value: str) -> NameField:
    """Build a name field from "Family, Given" or a bare family name."""
    segments = value.split(",")
    if len(segments) == 2:
        parts = NameParts(family=_name_part(segments[0]), given=_name_part(segments[1]))
        return NameField(key=key, full=True, parts=parts)
    if len(segments) > 2:
        # e.g. "Smith, John, Jr"; suffix position is ambiguous
        logger.debug("Name %r has %d commas; keeping it whole as family", value, len(segments) - 1)
    return NameField(key=key, full=False, parts=NameParts(family=_name_part(value)))


def _name_part(segment: str) -> Optional[str]:
    # blank parts are left unset so they are omitted on output
    return segment.strip() or None


def _publication_type(value: str) -> FieldVariant:
    # https://aurimasv.github.io/z2csl/typeMap.xml#map-journalArticle
    if value == JOURNAL_ARTICLE:
        return OrdinaryField(key="type", value="article-journal")
    return Ignored


def _article_identifier(value: str) -> FieldVariant:
    if value.endswith(DOI_SUFFIX):
        return OrdinaryField(key="DOI", value=value[: -len(DOI_SUFFIX)].strip())
    return Ignored


_SPECIAL_TAGS: Dict[str, Callable[[str], FieldVariant]] = {
    "PMID": lambda value: OrdinaryField(key="note", value=f"PMID: {value}"),
    "PMC": lambda value: OrdinaryField(key="note", value=f"PMCID: {value}"),
    "PT": _publication_type,
    "AID": _article_identifier,
    # Author identifiers (usually ORCID) sit inside author lists; CSL names have no slot for them
    "AUID": lambda value: Ignored,
}


def process_tag(tag: str, value: str) -> FieldVariant:
    """Convert one nbib tag/value pair into a CSL field, or ``Ignored``."""
    if not tag or len(tag) > 4:
        raise MalformedRecord("nbib tags are 1-4 characters", line=f"{tag}- {value}")

    if tag in _ORDINARY_TAGS:
        return OrdinaryField(key=_ORDINARY_TAGS[tag], value=value)
    if tag in _NAME_TAGS:
        return split_name(_NAME_TAGS[tag], value)
    if tag in _DATE_TAGS:
        return DateField(key=_DATE_TAGS[tag], parts=DateParts(raw=value))
    handler = _SPECIAL_TAGS.get(tag)
    if handler:
        return handler(value)
    return Ignored


def parse_line(line: str) -> Tuple[str, str]:
    """Split a merged "XXXX- value" line into its tag and value."""
    if len(line) < MIN_RECORD_LENGTH or line[SEPARATOR_INDEX] != SEPARATOR:
        raise MalformedRecord(line=line)
    tag = line[:SEPARATOR_INDEX].rstrip()
    if not tag:
        raise MalformedRecord("nbib tags are 1-4 characters", line=line)
    return tag, line[VALUE_OFFSET:]


def map_fields(lines: Iterable[str]) -> Iterator[CSLField]:
    """Yield the CSL fields for merged lines, dropping ignored tags."""
    for line in lines:
        tag, value = parse_line(line)
        result = process_tag(tag, value)
        if result is Ignored:
            continue
        yield result


def recognized_tags() -> Iterable[str]:
    return sorted(set(_ORDINARY_TAGS) | set(_NAME_TAGS) | set(_DATE_TAGS) | set(_SPECIAL_TAGS))
