# -*- encoding: utf-8 -*-
# @File   : coerce.py
# @Time   : 2024/10/13 01:47:25
# @Author : Kariko Lin

"""Conversion between raw strings and typed field values."""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, NamedTuple, TypeVar

from ..codec import (
    LIST_SEP,
    RawDocument,
    RawSection,
    render_list,
    split_list
)
from ..errors import FieldCoercionError
from .consts import FALSE_WORDS, TRUE_WORDS, ErrorPolicy, FieldKind
from .model import FieldDescriptor, RecordSchema

T = TypeVar('T')

logger = logging.getLogger(__name__)

# int() alone would take "1_000" and unicode digits.
_INTEGER = re.compile(r'[+-]?[0-9]+')


class FieldIssue(NamedTuple):
    section: int  # index among loaded sections
    lineno: int
    key: str
    value: str
    error: FieldCoercionError


@dataclass
class LoadReport:
    """What got lost while loading. Nothing here stops a load
    unless the `ErrorPolicy` says so."""
    records: int = 0
    issues: list[FieldIssue] = field(default_factory=list)
    # (lineno, key)
    unknown_keys: list[tuple[int, str]] = field(default_factory=list)
    readonly_keys: list[tuple[int, str]] = field(default_factory=list)
    # (lineno, line), from the codec
    dropped: list[tuple[int, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues

    def __str__(self) -> str:
        return (f'{self.records} record(s), {len(self.issues)} bad value(s), '
                f'{len(self.unknown_keys)} unknown key(s), '
                f'{len(self.dropped)} dropped line(s)')


def _decode_scalar(desc: FieldDescriptor, kind: FieldKind, raw: str) -> Any:
    match kind:
        case FieldKind.STRING:
            return raw
        case FieldKind.INTEGER:
            if _INTEGER.fullmatch(raw):
                return int(raw)
        case FieldKind.FLOAT:
            try:
                return float(raw)
            except ValueError:
                pass
        case FieldKind.BOOLEAN:
            if raw.lower() in TRUE_WORDS:
                return True
            if raw.lower() in FALSE_WORDS:
                return False
        case FieldKind.ENUM:
            if (member := desc.enum_members.get(raw.casefold())) is not None:
                return member
            # numeric form of a declared value is also fine.
            if _INTEGER.fullmatch(raw):
                for i in desc.enum_type:
                    if i.value == int(raw):
                        return i
            raise FieldCoercionError(
                desc.name, raw, kind,
                f'expect one of {list(desc.enum_type.__members__)}')
    raise FieldCoercionError(desc.name, raw, kind)


def decode_value(desc: FieldDescriptor, raw: str) -> Any:
    """Raises:
        FieldCoercionError: if `raw` doesn't fit the field type.
    """
    if desc.kind is not FieldKind.LIST:
        return _decode_scalar(desc, desc.kind, raw)
    items = split_list(raw)
    if items is None:
        raise FieldCoercionError(desc.name, raw, desc.kind,
                                 'lists should be wrapped in "[...]"')
    # any bad element rejects the whole list.
    return desc.container(
        _decode_scalar(desc, desc.scalar_kind, i) for i in items)


def _encode_scalar(desc: FieldDescriptor, value: Any,
                   in_list: bool = False) -> str:
    if value is None:
        ret = ''
    elif isinstance(value, Enum):
        ret = value.name
    else:
        ret = str(value)
    # things the line grammar would split or trim on the way back.
    if '\n' in ret or '\r' in ret:
        reason = 'line breaks cannot be stored'
    elif ret != ret.strip():
        reason = 'leading or trailing whitespace would be trimmed'
    elif in_list and LIST_SEP in ret:
        reason = f'"{LIST_SEP}" cannot be stored in a list element'
    else:
        return ret
    raise FieldCoercionError(desc.name, ret, desc.scalar_kind, reason)


def encode_value(desc: FieldDescriptor, value: Any) -> str | None:
    """`None` means the field should not be written at all.

    Raises:
        FieldCoercionError: if the value wouldn't load back the same.
    """
    if value is None:
        return None
    if desc.kind is not FieldKind.LIST or isinstance(value, str):
        return _encode_scalar(desc, value)
    items = [_encode_scalar(desc, i, True) for i in value]
    if items == ['']:
        raise FieldCoercionError(desc.name, '', desc.scalar_kind,
                                 'a single empty element reads as []')
    return render_list(items)


def _should_raise(policy: ErrorPolicy, err: FieldCoercionError) -> bool:
    match policy:
        case ErrorPolicy.STRICT:
            return True
        case ErrorPolicy.RAISE_ENUM:
            return err.is_enum
        case _:
            return False


def decode_record(
    schema: RecordSchema[T], section: RawSection, *,
    policy: ErrorPolicy = ErrorPolicy.CONTINUE,
    report: LoadReport | None = None,
    index: int = 0
) -> T:
    """Build one record from a raw section.

    Later duplicated keys override earlier ones. Bad values keep the
    field as it was (the default), unless `policy` says to raise.
    """
    if report is None:
        report = LoadReport()
    obj = schema.new()
    for key, raw, lineno in section.pairs:
        desc = schema.find(key)
        if desc is None:
            report.unknown_keys.append((lineno, key))
            continue
        if desc.readonly:
            report.readonly_keys.append((lineno, key))
            continue
        try:
            value = decode_value(desc, raw)
        except FieldCoercionError as e:
            if _should_raise(policy, e):
                raise
            logger.debug('line %d: %s', lineno, e)
            report.issues.append(FieldIssue(index, lineno, key, raw, e))
            continue
        desc.set(obj, value)
    return obj


def decode_records(
    schema: RecordSchema[T], doc: RawDocument, *,
    policy: ErrorPolicy = ErrorPolicy.CONTINUE
) -> tuple[list[T], LoadReport]:
    report = LoadReport(dropped=list(doc.dropped))
    ret = [
        decode_record(schema, sect, policy=policy, report=report, index=i)
        for i, sect in enumerate(doc.sections)
    ]
    report.records = len(ret)
    return ret, report


def encode_record(
    schema: RecordSchema[T], record: T
) -> list[tuple[str, str]]:
    """Encoded `(key, value)` pairs in declaration order,
    absent values skipped."""
    ret = []
    for desc in schema:
        value = encode_value(desc, desc.get(record))
        if value is None:
            continue
        ret.append((desc.name.lower(), value))
    return ret


def encode_records(
    schema: RecordSchema[T], records: Iterable[T]
) -> list[list[tuple[str, str]]]:
    return [encode_record(schema, i) for i in records]
