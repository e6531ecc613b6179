"""Data models for nbib to CSL conversion."""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Dict, List, Optional, Tuple, Union


class _Ignored:
    """Marker for tags that produce no CSL output."""

    _instance: Optional["_Ignored"] = None

    def __new__(cls) -> "_Ignored":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Ignored"

    def __bool__(self) -> bool:
        return False


Ignored = _Ignored()


@dataclass(frozen=True)
class NameParts:
    """CSL name variable parts.

    Attribute names use underscores; ``to_csl`` emits the hyphenated CSL keys.
    """

    family: Optional[str] = None
    given: Optional[str] = None
    dropping_particle: Optional[str] = None
    non_dropping_particle: Optional[str] = None
    suffix: Optional[str] = None
    comma_suffix: Optional[str] = None
    static_ordering: Optional[str] = None
    literal: Optional[str] = None
    parse_names: Optional[str] = None

    def to_csl(self) -> Dict[str, str]:
        return _present_parts(self)


@dataclass(frozen=True)
class DateParts:
    """CSL date variable parts. Only ``raw`` is filled from nbib input."""

    date_parts: Optional[str] = None
    season: Optional[str] = None
    circa: Optional[str] = None
    literal: Optional[str] = None
    raw: Optional[str] = None
    edtf: Optional[str] = None

    def to_csl(self) -> Dict[str, str]:
        return _present_parts(self)


@dataclass(frozen=True)
class OrdinaryField:
    key: str
    value: str


@dataclass(frozen=True)
class NameField:
    key: str
    full: bool
    parts: NameParts


@dataclass(frozen=True)
class DateField:
    key: str
    parts: DateParts


CSLField = Union[OrdinaryField, NameField, DateField]
FieldVariant = Union[_Ignored, OrdinaryField, NameField, DateField]


@dataclass(frozen=True)
class CitationRecord:
    """One assembled citation, ready for serialization."""

    identifier: str
    fields: Tuple[OrdinaryField, ...] = ()
    names: Tuple[NameField, ...] = ()
    dates: Tuple[DateField, ...] = ()

    def field_values(self, key: str) -> List[str]:
        return [item.value for item in self.fields if item.key == key]

    def names_for(self, key: str) -> List[NameParts]:
        return [item.parts for item in self.names if item.key == key]


@dataclass
class ConversionIssue:
    """A citation block that could not be converted."""

    code: str
    message: str
    block: Optional[int] = None
    context: Optional[str] = None
    severity: str = "error"


@dataclass
class ConversionResult:
    """Container for the records and issues of one conversion run."""

    records: List[CitationRecord] = field(default_factory=list)
    issues: List[ConversionIssue] = field(default_factory=list)
    blocks: int = 0


def _present_parts(parts) -> Dict[str, str]:
    return {
        item.name.replace("_", "-"): getattr(parts, item.name)
        for item in fields(parts)
        if getattr(parts, item.name) is not None
    }
