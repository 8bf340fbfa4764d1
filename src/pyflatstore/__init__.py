# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 21:32:40
# @Author : Kariko Lin

from .codec import read_sections, read_text, render_sections
from .config import StoreConfig
from .errors import (
    FieldCoercionError,
    FlatStoreError,
    RecordTypeError,
    UnknownFieldError
)
from .mapper import (
    ErrorPolicy,
    FieldDescriptor,
    FieldKind,
    LoadReport,
    RecordSchema,
    readonly_field
)
from .store import RecordStore

__all__ = [
    'RecordStore', 'StoreConfig',
    'RecordSchema', 'FieldDescriptor', 'FieldKind', 'readonly_field',
    'ErrorPolicy', 'LoadReport',
    'FlatStoreError', 'FieldCoercionError', 'UnknownFieldError',
    'RecordTypeError',
    'read_sections', 'read_text', 'render_sections'
]
