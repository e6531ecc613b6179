"""Fold CSL fields into citation records."""
from __future__ import annotations

import hashlib
import json
from typing import Iterable, List, Sequence

from .models import CitationRecord, CSLField, DateField, NameField, OrdinaryField

IDENTIFIER_LENGTH = 16


def record_identifier(
    fields: Sequence[OrdinaryField],
    names: Sequence[NameField],
    dates: Sequence[DateField],
) -> str:
    """Return a content hash of the three field slots.

    Stable across runs and processes; depends only on keys and values.
    """
    canonical = {
        "fields": [[item.key, item.value] for item in fields],
        "names": [[item.key, item.parts.to_csl()] for item in names],
        "dates": [[item.key, item.parts.to_csl()] for item in dates],
    }
    payload = json.dumps(canonical, sort_keys=True, ensure_ascii=False, separators=(",", ":"))
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()[:IDENTIFIER_LENGTH]


def assemble(items: Iterable[CSLField]) -> CitationRecord:
    fields: List[OrdinaryField] = []
    names: List[NameField] = []
    dates: List[DateField] = []
    for item in items:
        if isinstance(item, OrdinaryField):
            fields.append(item)
        elif isinstance(item, NameField):
            names.append(item)
        elif isinstance(item, DateField):
            dates.append(item)
        else:
            raise TypeError(f"Unexpected field variant: {item!r}")
    return CitationRecord(
        identifier=record_identifier(fields, names, dates),
        fields=tuple(fields),
        names=tuple(names),
        dates=tuple(dates),
    )
