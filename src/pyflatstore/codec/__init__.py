# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 22:04:30
# @Author : Kariko Lin

from .model import RawDocument, RawPair, RawSection, Token, TokenKind
from .parser import (
    LIST_SEP,
    SECTION_TAG,
    read_sections,
    read_text,
    render_list,
    render_sections,
    split_list,
    tokenize
)
