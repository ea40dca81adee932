"""Users of the university system and their roles."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Role(str, Enum):
    """Role a user holds in the system; values match the database column."""

    ADMIN = "admin"
    STUDENT = "student"
    LECTURER = "prowadzacy"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class User:
    """A user account as stored in the database."""

    user_id: int
    album_number: int
    name: str
    password: str = field(repr=False)
    role: Role


@dataclass(frozen=True)
class Admin(User):
    """An administrator who manages users and departments."""

    role: Role = field(default=Role.ADMIN, init=False)


@dataclass(frozen=True)
class Student(User):
    """A student enrolled in courses."""

    role: Role = field(default=Role.STUDENT, init=False)


@dataclass(frozen=True)
class Lecturer(User):
    """A lecturer who runs courses."""

    role: Role = field(default=Role.LECTURER, init=False)


_CLASSES: dict[Role, type[User]] = {
    Role.ADMIN: Admin,
    Role.STUDENT: Student,
    Role.LECTURER: Lecturer,
}


def user_for_role(user_id, album_number, name, password, role) -> User:
    """Build the user subclass matching ``role``; raise ValueError for unknown roles."""
    try:
        kind = Role(role)
    except ValueError:
        raise ValueError(f"unknown role: {role!r}") from None
    return _CLASSES[kind](user_id, album_number, name, password)