# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/12 22:05:41
# @Author : Kariko Lin

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple


class TokenKind(str, Enum):
    SECTION = 'section'
    FIELD = 'field'
    # unsplittable lines, and field lines before any section.
    DROPPED = 'dropped'


class Token(NamedTuple):
    """Only for IO process."""
    kind: TokenKind
    lineno: int
    key: str
    value: str = ''


class RawPair(NamedTuple):
    key: str
    value: str
    lineno: int


@dataclass
class RawSection:
    """One `[tag]` block, values still in string form."""
    tag: str
    lineno: int = 0
    pairs: list[RawPair] = field(default_factory=list)

    def add(self, key: str, value: str, lineno: int = 0) -> None:
        self.pairs.append(RawPair(key, value, lineno))

    def __len__(self) -> int:
        return len(self.pairs)


@dataclass
class RawDocument:
    sections: list[RawSection] = field(default_factory=list)
    # (lineno, stripped line)
    dropped: list[tuple[int, str]] = field(default_factory=list)
