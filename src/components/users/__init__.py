"""
Users component - user administration for the admin console.
"""

from .component import (
    PIN_LENGTH,
    run_create_user,
    run_deactivate_user,
    run_get_user,
    run_list_users,
    run_reset_password,
    run_reset_pin,
    run_update_user,
)
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

__all__ = [
    "PIN_LENGTH",
    # Entry points
    "run_create_user",
    "run_deactivate_user",
    "run_get_user",
    "run_list_users",
    "run_reset_password",
    "run_reset_pin",
    "run_update_user",
    # Input models
    "CreateUserInput",
    "DeactivateUserInput",
    "GetUserInput",
    "ListUsersInput",
    "ResetPasswordInput",
    "ResetPinInput",
    "UpdateUserInput",
    # Output models
    "ActionOutput",
    "UserListOutput",
    "UserOutput",
    # Ports
    "CredentialHasherPort",
    "TimePort",
    "UserStorePort",
]
