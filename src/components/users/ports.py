"""
Users component port definitions.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from src.ports.repo import UserStorePort


class CredentialHasherPort(Protocol):
    def digest(self, secret: str) -> str:
        """Digest stored in place of the plaintext secret."""
        ...


class TimePort(Protocol):
    """Port for time operations - enables deterministic testing."""

    def now_utc(self) -> datetime:
        """Get current UTC time."""
        ...


__all__ = ["CredentialHasherPort", "TimePort", "UserStorePort"]
