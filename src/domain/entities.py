from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, Field

# --- Enums / Literals ---
UserStatus = Literal["active", "suspended"]


def utc_now() -> datetime:
    return datetime.now(UTC)


def normalize_login_id(login_id: str) -> str:
    """Login IDs are stored and looked up upper-cased."""
    return login_id.strip().upper()


# --- Users ---

class Identity(BaseModel):
    login_id: str
    full_name: str
    role_tag: str
    credential_digest: str
    pin_digest: str
    status: UserStatus = "active"

    email: str | None = None
    phone: str | None = None
    city: int | None = None
    last_login: datetime | None = None

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    created_by: str = "system"
    updated_by: str = "system"

    def to_summary(self) -> "UserSummary":
        return UserSummary(
            login_id=self.login_id,
            full_name=self.full_name,
            status=self.status,
            role_tag=self.role_tag,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    def to_profile(self) -> "UserProfile":
        return UserProfile.model_validate(
            self.model_dump(exclude={"credential_digest", "pin_digest"})
        )


class UserSummary(BaseModel):
    """Row shape returned by the user listing."""

    login_id: str
    full_name: str
    status: UserStatus
    role_tag: str
    created_at: datetime
    updated_at: datetime


class UserProfile(BaseModel):
    """Identity without credential material."""

    login_id: str
    full_name: str
    role_tag: str
    status: UserStatus
    email: str | None = None
    phone: str | None = None
    city: int | None = None
    last_login: datetime | None = None
    created_at: datetime
    updated_at: datetime
    created_by: str
    updated_by: str


# --- Login history ---

class LoginLogEntry(BaseModel):
    login_id: str
    status: str
    action_date: datetime
    channel_media: str | None = None
    channel_device: str | None = None
    ip_address: str | None = None


# --- Sessions ---

class TokenClaims(BaseModel):
    login_id: str
    role_tag: str
    issued_at: datetime
    expires_at: datetime


# --- Client accounts ---

class ClientDetail(BaseModel):
    """Entry of the client master list."""

    client_code: str
    client_name: str


class UserClient(BaseModel):
    """A client account assigned to a login ID."""

    login_id: str
    client_code: str
    client_name: str | None = None
    created_at: datetime
    created_by: str


# --- Reference data ---

class City(BaseModel):
    city_code: int
    city_name: str
