# -*- encoding: utf-8 -*-
# @File   : store.py
# @Time   : 2024/10/14 20:18:52
# @Author : Kariko Lin

"""In-memory record collection backed by one flat file.

Not thread-safe, and `save()` is not atomic: a crash in the middle
may leave a truncated file behind.
"""

import logging
from io import StringIO
from os import PathLike
from os.path import exists
from typing import Any, Callable, Iterator

from chardet import detect as guess_codec

from .abstract import FileHandler
from .codec import SECTION_TAG, RawDocument, read_sections, render_sections
from .config import StoreConfig
from .mapper import (
    ErrorPolicy,
    LoadReport,
    RecordSchema,
    decode_records,
    encode_records
)

logger = logging.getLogger(__name__)


class RecordStore[T](FileHandler[list[T]]):
    def __init__(
        self, record_type: type[T],
        filename: str | PathLike[str], *,
        encoding: str = 'utf-8',
        policy: ErrorPolicy | str = ErrorPolicy.CONTINUE,
        section_tag: str = SECTION_TAG,
        autoload: bool = True
    ) -> None:
        super().__init__(filename)
        self._schema = RecordSchema.of(record_type)
        self._codec = encoding
        # what the file turned out to be in, when `encoding` failed.
        self._detected: str | None = None
        self._policy = ErrorPolicy.parse(policy)
        self._tag = section_tag
        self._items: list[T] = []
        self.last_report = LoadReport()
        if autoload:
            self.load()

    @classmethod
    def from_config(
        cls, record_type: type[T], config: StoreConfig
    ) -> 'RecordStore[T]':
        return cls(
            record_type, config.path,
            encoding=config.encoding,
            policy=config.policy,
            section_tag=config.section_tag,
            autoload=config.autoload)

    @property
    def schema(self) -> RecordSchema[T]:
        return self._schema

    @property
    def policy(self) -> ErrorPolicy:
        return self._policy

    @staticmethod
    def _decode_file(filename: str) -> tuple[StringIO, str]:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = guess_codec(raw)
        if codec is None or codec['encoding'] is None \
                or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}
        logger.debug('%s: decoding as %s', filename, codec['encoding'])
        return (
            StringIO(raw.decode(codec['encoding'], errors='replace')),
            codec['encoding'])

    def _read_document(self) -> RawDocument:
        try:
            with open(self._fn, 'r', encoding=self._codec) as fp:
                doc = read_sections(fp)
        except UnicodeDecodeError:
            # wrong `encoding` given, let chardet have a try.
            buf, self._detected = self._decode_file(self._fn)
            return read_sections(buf)
        self._detected = None
        return doc

    def read(self) -> list[T]:
        """读取文件为记录列表，不影响内存中的集合。

        文件不存在时返回空列表。
        """
        return self._read()[0]

    def _read(self) -> tuple[list[T], LoadReport]:
        if not exists(self._fn):
            logger.info('%s not found, starting empty.', self._fn)
            return [], LoadReport()
        return decode_records(
            self._schema, self._read_document(), policy=self._policy)

    def write(self, instance: list[T]) -> None:
        """覆盖写入*整个*文件。"""
        text = render_sections(
            encode_records(self._schema, instance), self._tag)
        # encode before truncating, a failure must leave the file as it was.
        data = text.encode(self._detected or self._codec)
        with open(self._fn, 'wb') as fp:
            fp.write(data)

    def load(self) -> LoadReport:
        """Replace the collection with what the file holds."""
        items, report = self._read()
        self._items = items
        self.last_report = report
        logger.info('Loaded %s from %s.', report, self._fn)
        return report

    def save(self) -> None:
        self.write(self._items)
        logger.info('Saved %d record(s) to %s.', len(self._items), self._fn)

    def get_all(self) -> list[T]:
        """The live collection, *not* a copy."""
        return self._items

    def create(self, item: T) -> None:
        self._items.append(item)

    def _index_of(self, key_field: str, key_value: Any) -> int:
        desc = self._schema.require(key_field)
        for idx, item in enumerate(self._items):
            val = desc.get(item)
            if val is not None and val == key_value:
                return idx
        return -1

    def lookup(self, key_field: str, key_value: Any) -> T | None:
        """First record whose `key_field` equals `key_value`.

        Raises:
            UnknownFieldError: if the record type has no `key_field`.
        """
        idx = self._index_of(key_field, key_value)
        return None if idx < 0 else self._items[idx]

    def update(
        self, key_field: str, key_value: Any,
        mutate: Callable[[T], Any]
    ) -> bool:
        """Apply `mutate` in place on the first match.

        Returns `False` if nothing matches.
        """
        if (item := self.lookup(key_field, key_value)) is None:
            return False
        mutate(item)
        return True

    def delete(self, key_field: str, key_value: Any) -> bool:
        """Remove the first match only."""
        idx = self._index_of(key_field, key_value)
        if idx < 0:
            return False
        del self._items[idx]
        return True

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __str__(self) -> str:
        return (f'{self._schema.record_type.__qualname__} store: '
                + super().__str__() + f'({self._codec})')
