from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities import (
    City,
    ClientDetail,
    LoginLogEntry,
    UserClient,
    UserProfile,
    UserSummary,
)


# --- Envelopes ---
class BaseResponse(BaseModel):
    status_code: int
    message: str
    data: Any | None = None


class ErrorResponse(BaseModel):
    status_code: int
    message: str
    code: str
    field: str | None = None


# --- Auth ---
class LoginRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    login_id: str = Field(alias="loginID")
    password: str


class TokenData(BaseModel):
    token: str
    token_type: str = "bearer"
    expires_in: int
    login_id: str
    role_tag: str


class SessionData(BaseModel):
    login_id: str
    role_tag: str
    expires_at: int


# --- Users ---
class UserCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    login_id: str = Field(alias="loginID")
    full_name: str
    password: str
    pin: str
    role_tag: str
    email: str | None = None
    phone: str | None = None
    city: int | None = None


class UserUpdateRequest(BaseModel):
    full_name: str | None = None
    email: str | None = None
    phone: str | None = None
    city: int | None = None


class ResetPasswordRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    login_id: str = Field(alias="loginID")
    password: str


class ResetPinRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    login_id: str = Field(alias="loginID")
    pin: str


class UserListData(BaseModel):
    users: list[UserSummary]
    page: int
    size: int
    total: int


class UserData(BaseModel):
    user: UserProfile


class ActionData(BaseModel):
    login_id: str


# --- Logs ---
class LogListData(BaseModel):
    logs: list[LoginLogEntry]
    page: int
    size: int
    total: int


# --- Clients ---
class UserClientsData(BaseModel):
    login_id: str
    clients: list[UserClient]


class ClientListData(BaseModel):
    clients: list[ClientDetail]


# --- Reference data ---
class CityListData(BaseModel):
    cities: list[City]
