# -*- encoding: utf-8 -*-
# @File   : config.py
# @Time   : 2024/10/14 19:33:06
# @Author : Kariko Lin

"""Store settings, in code or from a YAML file like:

    ```yaml
    path: users.txt
    encoding: utf-8
    section_tag: user
    policy: continue   # or raise_enum, strict
    autoload: true
    ```
"""

from dataclasses import dataclass, fields
from os import PathLike, fspath
from os.path import dirname, isabs, join
from typing import Any, Mapping
from warnings import warn

import yaml

from .codec import SECTION_TAG
from .mapper import ErrorPolicy


@dataclass(kw_only=True)
class StoreConfig:
    path: str
    encoding: str = 'utf-8'
    section_tag: str = SECTION_TAG
    policy: ErrorPolicy = ErrorPolicy.CONTINUE
    autoload: bool = True

    def __post_init__(self) -> None:
        self.path = fspath(self.path)
        self.policy = ErrorPolicy.parse(self.policy)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'StoreConfig':
        known = {i.name for i in fields(cls)}
        for key in data.keys() - known:
            warn(f'Unknown store option "{key}" is ignored.')
        if 'path' not in data:
            raise ValueError('Store config requires a "path".')
        return cls(**{k: v for k, v in data.items() if k in known})

    @classmethod
    def from_yaml(cls, filename: str | PathLike[str]) -> 'StoreConfig':
        """Relative `path` is resolved against the YAML file's folder."""
        filename = fspath(filename)
        with open(filename, 'r', encoding='utf-8') as fp:
            data = yaml.safe_load(fp) or {}
        if not isinstance(data, Mapping):
            raise ValueError(
                f'{filename}: expect a mapping, got {type(data).__name__}.')
        ret = cls.from_mapping(data)
        if not isabs(ret.path):
            ret.path = join(dirname(filename), ret.path)
        return ret

    def to_yaml(self) -> str:
        return yaml.safe_dump({
            'path': self.path,
            'encoding': self.encoding,
            'section_tag': self.section_tag,
            'policy': self.policy.value,
            'autoload': self.autoload,
        }, sort_keys=False)
