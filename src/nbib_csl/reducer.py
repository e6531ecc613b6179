"""Collapse duplicate author/editor entries."""
from __future__ import annotations

from typing import Iterable, List

from .grouping import group_adjacent
from .models import CSLField, NameField


def _same_role(left: CSLField, right: CSLField) -> bool:
    return isinstance(left, NameField) and isinstance(right, NameField) and left.key == right.key


def _lead_token(field: NameField) -> str:
    tokens = (field.parts.family or "").split()
    return tokens[0] if tokens else ""


def _same_person(left: CSLField, right: CSLField) -> bool:
    return (
        isinstance(left, NameField)
        and isinstance(right, NameField)
        and _lead_token(left) == _lead_token(right)
    )


def reduce_names(fields: Iterable[CSLField]) -> List[CSLField]:
    """Drop name fields that repeat the person named just before them.

    MEDLINE lists each author twice, "FAU - Blachly, James S" then "AU  - Blachly JS".
    Within each run of same-role names, neighbours sharing the first token of the
    family name are collapsed to the first occurrence. Only adjacent duplicates are
    merged.

    The result lists every non-name field in its original order, followed by the
    surviving names in their original order.
    """
    others: List[CSLField] = []
    names: List[CSLField] = []
    for run in group_adjacent(fields, _same_role):
        if not isinstance(run[0], NameField):
            others.extend(run)
            continue
        names.extend(person[0] for person in group_adjacent(run, _same_person))
    return others + names
