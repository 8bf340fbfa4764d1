# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/10/13 00:12:48
# @Author : Kariko Lin

from enum import Enum


class FieldKind(str, Enum):
    STRING = 'string'
    INTEGER = 'integer'
    FLOAT = 'float'
    BOOLEAN = 'boolean'
    ENUM = 'enum'
    LIST = 'list'

    def __str__(self) -> str:
        return self.value


class ErrorPolicy(str, Enum):
    """What to do when a value cannot be converted while loading."""
    # catch everything per field, keep the old value, report it.
    CONTINUE = 'continue'
    # older behaviour: only enum failures propagate.
    RAISE_ENUM = 'raise_enum'
    STRICT = 'strict'

    @classmethod
    def parse(cls, name: 'str | ErrorPolicy') -> 'ErrorPolicy':
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise ValueError(
                f'Error policy should be a name, got {name!r}.')
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(
                f'Unknown error policy "{name}", '
                f'expect one of {[i.value for i in cls]}.') from None


TRUE_WORDS = frozenset({'true', 'yes', 'y', 'on', '1'})
FALSE_WORDS = frozenset({'false', 'no', 'n', 'off', '0'})
