from __future__ import annotations

from collections import Counter
from types import MappingProxyType
from typing import NamedTuple, Iterable, Mapping

Word = str  # Lowercased letters, other non-boundary characters verbatim


class WordCountError(Exception):
    exit_status: int


class InputReadError(WordCountError):
    """Reading the input stream failed"""
    exit_status = 1


class ProcessingError(WordCountError):
    """Tokenizing or aggregating failed"""
    exit_status = 2


class OutputWriteError(WordCountError):
    """Writing the results failed"""
    exit_status = 3


class RankedEntry(NamedTuple):
    word: Word
    count: int

    def __str__(self):
        return f"{self.word} {self.count}"


class FrequencyTable(Counter):
    """Counts of each distinct word. Only mutated while aggregating."""

    @classmethod
    def combine(cls, tables: Iterable[Mapping[Word, int]]) -> FrequencyTable:
        result = cls()
        for t in tables:
            for word, n in t.items():
                result[word] += n
        return result

    def merge(self, other: Mapping[Word, int]) -> FrequencyTable:
        return FrequencyTable.combine((self, other))

    def total_words(self) -> int:
        return sum(self.values())

    def freeze(self) -> Mapping[Word, int]:
        return MappingProxyType(self)
