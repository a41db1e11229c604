from typing import Protocol

from src.domain.entities import TokenClaims


class CredentialHasherPort(Protocol):
    scheme: str

    def digest(self, secret: str) -> str:
        """One-way transform of a secret for storage."""
        ...

    def verify(self, secret: str, digest: str) -> bool:
        ...


class TokenServicePort(Protocol):
    def issue(self, login_id: str, role_tag: str) -> str:
        ...

    def validate(self, token: str) -> TokenClaims:
        """Returns the claims or raises TokenRejected."""
        ...
