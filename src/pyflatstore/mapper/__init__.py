# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/13 00:10:55
# @Author : Kariko Lin

from .consts import ErrorPolicy, FieldKind
from .model import FieldDescriptor, RecordSchema, describe, readonly_field
from .coerce import (
    FieldIssue,
    LoadReport,
    decode_record,
    decode_records,
    decode_value,
    encode_record,
    encode_records,
    encode_value
)
