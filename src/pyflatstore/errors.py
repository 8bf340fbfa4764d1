# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/10/12 21:40:17
# @Author : Kariko Lin

"""Errors raised by the record store."""

from typing import Any


class FlatStoreError(Exception):
    """Base error for this package."""


class RecordTypeError(FlatStoreError, TypeError):
    """Raised when a class cannot serve as a record type,
    i.e. it is not a dataclass, or `cls()` fails."""


class FieldCoercionError(FlatStoreError, ValueError):
    """Raised when a raw string cannot be converted to the field's type."""
    def __init__(self, field: str, value: str, kind: Any,
                 reason: str = '') -> None:
        self.field = field
        self.value = value
        self.kind = kind
        msg = f'cannot convert {value!r} to {kind} for field "{field}"'
        if reason:
            msg += f': {reason}'
        super().__init__(msg)

    @property
    def is_enum(self) -> bool:
        # compared by name so this module doesn't import the mapper.
        return getattr(self.kind, 'name', None) == 'ENUM'


class UnknownFieldError(FlatStoreError, LookupError):
    """Raised when a key field does not exist on the record type.

    Unlike data errors, this always propagates to the caller.
    """
    def __init__(self, field: str, record_type: type) -> None:
        self.field = field
        self.record_type = record_type
        super().__init__(
            f'Field "{field}" not found in {record_type.__qualname__}.')

    def __str__(self) -> str:
        # LookupError would repr() the args otherwise.
        return self.args[0]
