from __future__ import annotations

from typing import Iterable, Iterator, List, Mapping

from model import RankedEntry, Word


def rank(table: Mapping[Word, int]) -> List[RankedEntry]:
    """Most frequent first; equal counts in alphabetical order"""
    items = sorted(table.items(), key=lambda item: (-item[1], item[0]))
    return [RankedEntry(w, n) for w, n in items]


def format_entries(entries: Iterable[RankedEntry]) -> Iterator[str]:
    for e in entries:
        yield f"{e}\n"
