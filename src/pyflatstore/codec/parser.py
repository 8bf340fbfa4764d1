# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/12 22:31:09
# @Author : Kariko Lin

"""Line-oriented codec of the record file.

```
# comment
[user]
name: Alice
tags: [a, b, c]

[user]
...
```

Stateless: it only deals with strings. Typing the values is done by
`pyflatstore.mapper`.
"""

import logging
from io import StringIO, TextIOBase
from typing import Iterable, Iterator, Sequence

from .model import RawDocument, RawSection, Token, TokenKind

logger = logging.getLogger(__name__)

SECTION_TAG = 'user'
COMMENT = '#'
DELIMITER = ':'
LIST_SEP = ','


def is_section(line: str) -> bool:
    return line.startswith('[') and line.endswith(']')


def tokenize(lines: Iterable[str]) -> Iterator[Token]:
    """Turn raw lines into section/field events.

    Malformed lines are never fatal, they come out as `DROPPED` tokens.
    """
    in_section = False
    for lineno, raw in enumerate(lines, 1):
        line = raw.strip()
        if not line or line.startswith(COMMENT):
            continue
        if is_section(line):
            in_section = True
            yield Token(TokenKind.SECTION, lineno, line[1:-1])
            continue
        if DELIMITER not in line or not in_section:
            # no record to attach to, or nothing to split.
            yield Token(TokenKind.DROPPED, lineno, line)
            continue
        key, val = line.split(DELIMITER, 1)
        yield Token(TokenKind.FIELD, lineno, key.strip(), val.strip())


def read_sections(buf: TextIOBase | Iterable[str]) -> RawDocument:
    """读取解码好的字符串流，按小节分组。

    如没有特殊需求，直接用`RecordStore.load()`便是。
    """
    doc = RawDocument()
    this_sect: RawSection | None = None
    for tok in tokenize(buf):
        match tok.kind:
            case TokenKind.SECTION:
                this_sect = RawSection(tok.key, tok.lineno)
                doc.sections.append(this_sect)
            case TokenKind.FIELD if this_sect is not None:
                this_sect.add(tok.key, tok.value, tok.lineno)
            case _:
                logger.debug('line %d dropped: %r', tok.lineno, tok.key)
                doc.dropped.append((tok.lineno, tok.key))
    return doc


def read_text(text: str) -> RawDocument:
    return read_sections(StringIO(text))


def split_list(raw: str) -> list[str] | None:
    """`[a, b, c]` -> `['a', 'b', 'c']`; `None` if not bracketed."""
    raw = raw.strip()
    if not is_section(raw):
        return None
    inner = raw[1:-1]
    if not inner.strip():
        return []
    return [i.strip() for i in inner.split(LIST_SEP)]


def render_list(items: Iterable[str]) -> str:
    return '[' + f'{LIST_SEP} '.join(items) + ']'


def render_sections(
    rows: Iterable[Sequence[tuple[str, str]]],
    tag: str = SECTION_TAG, *,
    blank_lines: int = 1
) -> str:
    """Render encoded records, each as a `[tag]` block.

    Keys are written lowercased; rows are expected to already
    skip absent values.
    """
    ret = StringIO()
    for pairs in rows:
        ret.write(f'[{tag}]\n')
        for k, v in pairs:
            ret.write(f'{k.lower()}{DELIMITER} {v}\n')
        ret.write('\n' * blank_lines)
    return ret.getvalue()
