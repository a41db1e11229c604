from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# Token lifetime (2 hours) and PIN length (6) are fixed by the trading
# platform and are not rules keys; see JWTTokenService and the users component.


class AuthRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    admin_role: str = "ADMIN"
    token_algorithm: Literal["HS256", "HS384", "HS512"] = "HS256"
    credential_scheme: Literal["sha1", "argon2"] = "sha1"
    min_password_length: int = Field(default=1, ge=1)


class PaginationRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    default_size: int = Field(default=10, ge=1)


class OpsRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    required_env: list[str] = Field(default_factory=list)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])


class AdminRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    auth: AuthRules = Field(default_factory=AuthRules)
    pagination: PaginationRules = Field(default_factory=PaginationRules)
    ops: OpsRules = Field(default_factory=OpsRules)
