"""
Users component - user administration.

Listing, lookup, creation, profile updates, deactivation and credential
resets. Login IDs are upper-cased before every lookup. Digests never leave
this component: outputs carry UserSummary / UserProfile only.

Invariants:
- Login ID is immutable once created
- Status only moves active -> suspended
- PIN must be exactly PIN_LENGTH (6) characters
"""

from __future__ import annotations

import logging

from src.domain.entities import Identity, normalize_login_id
from src.domain.errors import NotFound, ValidationFailed
from src.domain.pagination import DEFAULT_SIZE, PageWindow

from .models import (
    ActionOutput,
    CreateUserInput,
    DeactivateUserInput,
    GetUserInput,
    ListUsersInput,
    ResetPasswordInput,
    ResetPinInput,
    UpdateUserInput,
    UserListOutput,
    UserOutput,
)
from .ports import CredentialHasherPort, TimePort, UserStorePort

logger = logging.getLogger(__name__)

PIN_LENGTH = 6


def _require_login_id(raw: str | None) -> str:
    login_id = normalize_login_id(raw or "")
    if not login_id:
        raise ValidationFailed("Login ID is required", field="login_id")
    return login_id


def _require_user(user_repo: UserStorePort, login_id: str) -> Identity:
    user = user_repo.find_by_login_id(login_id)
    if user is None:
        raise NotFound(f"User {login_id} not found")
    return user


def _validate_pin(pin: str | None) -> str:
    if pin is None or len(pin) != PIN_LENGTH:
        raise ValidationFailed(f"PIN must be exactly {PIN_LENGTH} characters", field="pin")
    return pin


def _validate_password(password: str | None, min_length: int) -> str:
    if password is None or len(password) < max(min_length, 1):
        raise ValidationFailed(
            f"Password must be at least {max(min_length, 1)} characters", field="password"
        )
    return password


# --- Component Entry Points ---


def run_list_users(
    inp: ListUsersInput,
    *,
    user_repo: UserStorePort,
    default_size: int = DEFAULT_SIZE,
) -> UserListOutput:
    window = PageWindow.from_page(inp.page, inp.size, inp.keyword, default_size=default_size)
    result = user_repo.list(window)
    return UserListOutput(
        users=[user.to_summary() for user in result.rows],
        page=window.page,
        size=window.size,
        total=result.total,
    )


def run_get_user(inp: GetUserInput, *, user_repo: UserStorePort) -> UserOutput:
    login_id = _require_login_id(inp.login_id)
    return UserOutput(user=_require_user(user_repo, login_id).to_profile())


def run_create_user(
    inp: CreateUserInput,
    *,
    user_repo: UserStorePort,
    hasher: CredentialHasherPort,
    time: TimePort,
    min_password_length: int = 1,
) -> UserOutput:
    login_id = _require_login_id(inp.login_id)
    if not inp.full_name or not inp.full_name.strip():
        raise ValidationFailed("Full name is required", field="full_name")
    if not inp.role_tag or not inp.role_tag.strip():
        raise ValidationFailed("Role is required", field="role_tag")
    password = _validate_password(inp.password, min_password_length)
    pin = _validate_pin(inp.pin)

    now = time.now_utc()
    identity = Identity(
        login_id=login_id,
        full_name=inp.full_name.strip(),
        role_tag=inp.role_tag.strip(),
        credential_digest=hasher.digest(password),
        pin_digest=hasher.digest(pin),
        status="active",
        email=inp.email,
        phone=inp.phone,
        city=inp.city,
        created_at=now,
        updated_at=now,
        created_by=inp.actor,
        updated_by=inp.actor,
    )
    # Store raises Conflict on a duplicate login ID
    user_repo.create(identity)
    logger.info("User %s created by %s", login_id, inp.actor)
    return UserOutput(user=identity.to_profile())


def run_update_user(
    inp: UpdateUserInput,
    *,
    user_repo: UserStorePort,
    time: TimePort,
) -> UserOutput:
    login_id = _require_login_id(inp.login_id)
    current = _require_user(user_repo, login_id)

    updates: dict[str, object] = {
        "updated_at": time.now_utc(),
        "updated_by": inp.actor,
    }
    if inp.full_name is not None:
        if not inp.full_name.strip():
            raise ValidationFailed("Full name must not be empty", field="full_name")
        updates["full_name"] = inp.full_name.strip()
    if inp.email is not None:
        updates["email"] = inp.email
    if inp.phone is not None:
        updates["phone"] = inp.phone
    if inp.city is not None:
        updates["city"] = inp.city

    updated = current.model_copy(update=updates)
    user_repo.update_profile(updated)
    logger.info("User %s updated by %s", login_id, inp.actor)
    return UserOutput(user=updated.to_profile())


def run_deactivate_user(
    inp: DeactivateUserInput,
    *,
    user_repo: UserStorePort,
    time: TimePort,
) -> ActionOutput:
    login_id = _require_login_id(inp.login_id)
    user = _require_user(user_repo, login_id)

    if user.status != "suspended":
        user_repo.update_status(login_id, "suspended", actor=inp.actor, at=time.now_utc())
        logger.info("User %s deactivated by %s", login_id, inp.actor)

    return ActionOutput(login_id=login_id, message="User deactivated successfully")


def run_reset_password(
    inp: ResetPasswordInput,
    *,
    user_repo: UserStorePort,
    hasher: CredentialHasherPort,
    time: TimePort,
    min_password_length: int = 1,
) -> ActionOutput:
    login_id = _require_login_id(inp.login_id)
    password = _validate_password(inp.new_password, min_password_length)

    user_repo.update_credential_digest(
        login_id, hasher.digest(password), actor=inp.actor, at=time.now_utc()
    )
    logger.info("Password reset for %s by %s", login_id, inp.actor)
    return ActionOutput(login_id=login_id, message="Password reset successfully")


def run_reset_pin(
    inp: ResetPinInput,
    *,
    user_repo: UserStorePort,
    hasher: CredentialHasherPort,
    time: TimePort,
) -> ActionOutput:
    login_id = _require_login_id(inp.login_id)
    pin = _validate_pin(inp.new_pin)

    user_repo.update_pin_digest(login_id, hasher.digest(pin), actor=inp.actor, at=time.now_utc())
    logger.info("PIN reset for %s by %s", login_id, inp.actor)
    return ActionOutput(login_id=login_id, message="Pin reset successfully")
