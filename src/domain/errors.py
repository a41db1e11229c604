"""
Error taxonomy shared by components, adapters and the HTTP boundary.

Components raise these; the API layer maps them to status codes.
"""

from __future__ import annotations


class AdminError(Exception):
    """Base class for all domain failures."""

    code = "error"

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code, "message": self.message}


class NotFound(AdminError):
    code = "not_found"


class Conflict(AdminError):
    code = "conflict"


class AuthenticationFailed(AdminError):
    code = "authentication_failed"


class AuthorizationFailed(AdminError):
    code = "authorization_failed"


class Unauthenticated(AdminError):
    """Raised by the session guard. `code` carries the rejection reason."""

    code = "unauthenticated"


class ValidationFailed(AdminError):
    code = "validation_failed"

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field

    def to_dict(self) -> dict[str, str]:
        data = super().to_dict()
        if self.field:
            data["field"] = self.field
        return data


class StoreUnavailable(AdminError):
    code = "store_unavailable"


class TokenRejected(AdminError):
    """Raised by the token service; `reason` is one of REJECT_REASONS."""

    REJECT_REASONS = ("malformed", "invalid", "expired", "forbidden_role")

    def __init__(self, reason: str, message: str | None = None):
        super().__init__(message or f"Token rejected: {reason}", code=reason)
        self.reason = reason


class MigrationFailed(AdminError):
    """A schema migration could not be applied; nothing from it was kept."""

    code = "migration_failed"

    def __init__(self, message: str, filename: str | None = None):
        super().__init__(message)
        self.filename = filename
