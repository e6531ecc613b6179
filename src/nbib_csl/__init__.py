"""MEDLINE/PubMed nbib to CSL-JSON conversion toolkit."""

from .app import NbibConverterApp
from .assembler import assemble, record_identifier
from .errors import InvalidState, MalformedLine, MalformedRecord, NbibError
from .exporters import to_csl_item, to_json
from .grouping import group_adjacent
from .models import (
    CitationRecord,
    ConversionIssue,
    ConversionResult,
    DateField,
    DateParts,
    Ignored,
    NameField,
    NameParts,
    OrdinaryField,
)
from .reducer import reduce_names
from .scanner import merge_continuations
from .tags import map_fields, process_tag

__all__ = [
    "NbibConverterApp",
    "assemble",
    "record_identifier",
    "NbibError",
    "MalformedLine",
    "InvalidState",
    "MalformedRecord",
    "to_csl_item",
    "to_json",
    "group_adjacent",
    "CitationRecord",
    "ConversionIssue",
    "ConversionResult",
    "DateField",
    "DateParts",
    "Ignored",
    "NameField",
    "NameParts",
    "OrdinaryField",
    "reduce_names",
    "merge_continuations",
    "map_fields",
    "process_tag",
]
