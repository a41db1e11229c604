"""
Users component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from src.domain.entities import UserProfile, UserSummary

SYSTEM_ACTOR = "system"


@dataclass(frozen=True)
class ListUsersInput:
    page: Any = None
    size: Any = None
    keyword: str | None = None


@dataclass(frozen=True)
class UserListOutput:
    users: list[UserSummary]
    page: int
    size: int
    total: int


@dataclass(frozen=True)
class GetUserInput:
    login_id: str


@dataclass(frozen=True)
class UserOutput:
    user: UserProfile


@dataclass(frozen=True)
class CreateUserInput:
    login_id: str
    full_name: str
    password: str
    pin: str
    role_tag: str
    email: str | None = None
    phone: str | None = None
    city: int | None = None
    actor: str = SYSTEM_ACTOR


@dataclass(frozen=True)
class UpdateUserInput:
    """Profile update; None leaves a field unchanged."""

    login_id: str
    full_name: str | None = None
    email: str | None = None
    phone: str | None = None
    city: int | None = None
    actor: str = SYSTEM_ACTOR


@dataclass(frozen=True)
class DeactivateUserInput:
    login_id: str
    actor: str = SYSTEM_ACTOR


@dataclass(frozen=True)
class ResetPasswordInput:
    login_id: str
    new_password: str
    actor: str = SYSTEM_ACTOR


@dataclass(frozen=True)
class ResetPinInput:
    login_id: str
    new_pin: str
    actor: str = SYSTEM_ACTOR


@dataclass(frozen=True)
class ActionOutput:
    login_id: str
    message: str
