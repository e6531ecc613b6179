"""Exporters for CSL-JSON output."""
from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List

from .models import CitationRecord

ID_KEY = "id"


def to_csl_item(record: CitationRecord) -> Dict[str, Any]:
    """Lay out a record as a CSL-JSON item.

    Ordinary fields stay flat; a key seen more than once (several ``note``
    sources) is joined with newlines. Names are grouped into arrays per role.
    Fields with no parts present are left out.
    """
    item: Dict[str, Any] = {ID_KEY: record.identifier}
    for field in record.fields:
        if field.key == ID_KEY:
            continue
        if field.key in item:
            item[field.key] = f"{item[field.key]}\n{field.value}"
        else:
            item[field.key] = field.value
    for name in record.names:
        parts = name.parts.to_csl()
        if parts:
            item.setdefault(name.key, []).append(parts)
    for date in record.dates:
        parts = date.parts.to_csl()
        if parts:
            item[date.key] = parts
    return item


def to_csl_items(records: Iterable[CitationRecord]) -> List[Dict[str, Any]]:
    return [to_csl_item(record) for record in records]


def to_json(records: Iterable[CitationRecord], indent: int | None = 2) -> str:
    return json.dumps(to_csl_items(records), indent=indent or None, ensure_ascii=False)
