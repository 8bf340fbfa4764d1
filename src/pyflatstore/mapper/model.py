# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/13 00:20:02
# @Author : Kariko Lin

"""Field descriptor tables of record types.

A record type is any *non-frozen* dataclass whose fields all have
defaults, so that `cls()` gives an empty record. e.g.

    ```python
    @dataclass
    class User:
        name: str | None = None
        age: int = 0
        role: Role = Role.GUEST
        tags: list[str] = field(default_factory=list)
        uid: int = readonly_field(default=0)
    ```

Field types are limited to `str`, `int`, `float`, `bool`, `Enum`s,
and homogeneous sequences of them (optionally `| None`).
"""

import dataclasses
import types
from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass
from enum import Enum
from functools import cached_property
from typing import Any, Iterator, Union, get_args, get_origin, get_type_hints
from warnings import warn

from ..errors import RecordTypeError, UnknownFieldError
from .consts import FieldKind

READONLY = 'pyflatstore.readonly'

_SCALARS: dict[type, FieldKind] = {
    str: FieldKind.STRING,
    int: FieldKind.INTEGER,
    float: FieldKind.FLOAT,
    bool: FieldKind.BOOLEAN,
}


def readonly_field(**kwargs: Any) -> Any:
    """`dataclasses.field()`, but the field would never be set on load.

    It still gets written on save.
    """
    metadata = dict(kwargs.pop('metadata', None) or {})
    metadata[READONLY] = True
    return dataclasses.field(metadata=metadata, **kwargs)


@dataclass(frozen=True)
class FieldDescriptor:
    name: str
    kind: FieldKind
    # for LIST only
    elem_kind: FieldKind | None = None
    # for ENUM, or LIST of ENUM
    enum_type: type[Enum] | None = None
    container: type = list
    readonly: bool = False

    @property
    def scalar_kind(self) -> FieldKind:
        """Kind of a single value: the element kind for lists."""
        return self.elem_kind if self.kind is FieldKind.LIST else self.kind

    @cached_property
    def enum_members(self) -> dict[str, Enum]:
        """Case-insensitive name table of the enum."""
        if self.enum_type is None:
            return {}
        # aliases included, first declared wins.
        ret: dict[str, Enum] = {}
        for name, member in self.enum_type.__members__.items():
            ret.setdefault(name.casefold(), member)
        return ret

    def get(self, obj: Any) -> Any:
        return getattr(obj, self.name, None)

    def set(self, obj: Any, value: Any) -> None:
        setattr(obj, self.name, value)


def _unwrap_optional(tp: Any) -> Any:
    if get_origin(tp) in (Union, types.UnionType):
        args = [i for i in get_args(tp) if i is not type(None)]
        if len(args) == 1:
            return args[0]
    return tp


def _scalar(tp: Any) -> tuple[FieldKind, type[Enum] | None] | None:
    # Enum before int, IntEnum is an int too.
    if isinstance(tp, type) and issubclass(tp, Enum):
        return FieldKind.ENUM, tp
    if tp in _SCALARS:
        return _SCALARS[tp], None
    return None


def describe(name: str, tp: Any, readonly: bool = False
             ) -> FieldDescriptor | None:
    """Build the descriptor of one annotated field.

    Returns `None` if the type is not supported.
    """
    tp = _unwrap_optional(tp)
    if (scalar := _scalar(tp)) is not None:
        return FieldDescriptor(name, scalar[0], enum_type=scalar[1],
                               readonly=readonly)

    if tp in (list, tuple):
        # bare containers hold strings.
        return FieldDescriptor(name, FieldKind.LIST, FieldKind.STRING,
                               container=tp, readonly=readonly)

    origin, args = get_origin(tp), get_args(tp)
    if origin not in (list, tuple, Sequence, MutableSequence) or not args:
        return None
    if origin is tuple and not (len(args) == 2 and args[1] is Ellipsis):
        # fixed-length tuples are composite.
        return None
    if (scalar := _scalar(_unwrap_optional(args[0]))) is None:
        return None
    return FieldDescriptor(
        name, FieldKind.LIST, scalar[0], scalar[1],
        container=tuple if origin is tuple else list,
        readonly=readonly)


class RecordSchema[T]:
    """Field descriptor table of a record type, in declaration order.

    Use `RecordSchema.of(cls)`, which builds the table once per type.
    """
    __cache: dict[type, 'RecordSchema[Any]'] = {}

    def __init__(
        self, record_type: type[T], fields: Sequence[FieldDescriptor]
    ) -> None:
        self.record_type = record_type
        self._fields = tuple(fields)
        self._lookup: dict[str, FieldDescriptor] = {}
        for i in self._fields:
            if i.name.casefold() in self._lookup:
                warn(f'{record_type.__qualname__} 中字段 "{i.name}" '
                     '与其他字段仅大小写不同，读取时将被忽略。')
                continue
            self._lookup[i.name.casefold()] = i

    @classmethod
    def of(cls, record_type: type[T]) -> 'RecordSchema[T]':
        if record_type not in cls.__cache:
            cls.__cache[record_type] = cls._build(record_type)
        return cls.__cache[record_type]

    @classmethod
    def _build(cls, record_type: type[T]) -> 'RecordSchema[T]':
        if not (isinstance(record_type, type)
                and dataclasses.is_dataclass(record_type)):
            raise RecordTypeError(
                f'{record_type!r} is not a dataclass type.')
        if record_type.__dataclass_params__.frozen:
            raise RecordTypeError(
                f'{record_type.__qualname__} is frozen, '
                'records have to be mutable.')
        try:
            hints = get_type_hints(record_type)
        except NameError as e:
            raise RecordTypeError(
                f'{record_type.__qualname__} has unresolved annotations: {e}'
            ) from e
        descriptors = []
        for f in dataclasses.fields(record_type):
            readonly = bool(f.metadata.get(READONLY)) or not f.init
            desc = describe(f.name, hints.get(f.name, f.type), readonly)
            if desc is None:
                warn(f'{record_type.__qualname__}.{f.name}: '
                     f'unsupported type {f.type!r}, the field is skipped.')
                continue
            descriptors.append(desc)
        ret = cls(record_type, descriptors)
        ret.new()  # fail early if no empty construction
        return ret

    def new(self) -> T:
        try:
            return self.record_type()
        except TypeError as e:
            raise RecordTypeError(
                f'{self.record_type.__qualname__} cannot be created '
                f'without arguments: {e}') from e

    def find(self, name: str) -> FieldDescriptor | None:
        """Case-insensitive."""
        return self._lookup.get(name.strip().casefold())

    def require(self, name: str) -> FieldDescriptor:
        if (ret := self.find(name)) is None:
            raise UnknownFieldError(name, self.record_type)
        return ret

    @property
    def fields(self) -> tuple[FieldDescriptor, ...]:
        return self._fields

    def __iter__(self) -> Iterator[FieldDescriptor]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None

    def __repr__(self) -> str:
        return '<RecordSchema %s { .fields = %d }>' % (
            self.record_type.__qualname__, len(self._fields))
