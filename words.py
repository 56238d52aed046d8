"""Split lines of text into words"""
from __future__ import annotations

import unicodedata
from typing import Iterator

from model import Word

LINE_END = '\n'

# Unicode space separators: space, line and paragraph
_SPACE_CATEGORIES = frozenset(('Zs', 'Zl', 'Zp'))


def is_boundary(c: str) -> bool:
    return c == LINE_END or unicodedata.category(c) in _SPACE_CATEGORIES


def _scan(line: str) -> Iterator[Word]:
    buffer = []
    for c in line:
        if c.isalpha():
            buffer.append(c.lower())
        elif is_boundary(c):
            if buffer:
                yield ''.join(buffer)
                buffer.clear()
        else:
            # Digits, punctuation, tabs etc. stay part of the word
            buffer.append(c)
    if buffer:
        yield ''.join(buffer)


class LineWords:
    """The words of a single line; each iteration rescans the line"""
    __slots__ = ['line']

    def __init__(self, line: str):
        self.line = line

    def __iter__(self) -> Iterator[Word]:
        return _scan(self.line)

    def __repr__(self):
        return f"〔words of {self.line!r}〕"


def words(line: str) -> LineWords:
    return LineWords(line)
