"""Shared record types and fixtures."""

from dataclasses import dataclass, field
from enum import Enum

import pytest

from pyflatstore import readonly_field


class Role(Enum):
    Guest = 0
    Member = 1
    Admin = 2


@dataclass
class User:
    name: str | None = None
    age: int = 0
    role: Role = Role.Guest
    tags: list[str] = field(default_factory=list)
    scores: list[int] | None = None
    uid: int = readonly_field(default=-1)


SAMPLE = """\
# users
[user]
name: Alice
age: 30
role: admin
tags: [red, green]
scores: [1, 2, 3]

[user]
name: Bob
age: abc
role: member

[user]
name: Alice
age: 41
"""


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / 'users.txt'
    path.write_text(SAMPLE, encoding='utf-8')
    return path


@pytest.fixture
def missing_file(tmp_path):
    return tmp_path / 'nowhere' / 'users.txt'
