"""Lazy grouping of adjacent items."""
from __future__ import annotations

from typing import Callable, Iterable, Iterator, List, TypeVar

T = TypeVar("T")


def group_adjacent(items: Iterable[T], same_group: Callable[[T, T], bool]) -> Iterator[List[T]]:
    """Yield maximal runs of neighbours for which ``same_group(left, right)`` holds.

    Grouping is by adjacency only: equal items separated by a non-matching item
    land in different runs. Items are passed through without copying and at most
    one item is read ahead of the run being built.
    """
    iterator = iter(items)
    try:
        run = [next(iterator)]
    except StopIteration:
        return
    for item in iterator:
        if same_group(run[-1], item):
            run.append(item)
        else:
            yield run
            run = [item]
    yield run
