from typing import Protocol

from src.domain.entities import Identity


class UserLookupPort(Protocol):
    def find_by_login_id(self, login_id: str) -> Identity | None: ...


class CredentialHasherPort(Protocol):
    def verify(self, secret: str, digest: str) -> bool: ...


class TokenIssuerPort(Protocol):
    def issue(self, login_id: str, role_tag: str) -> str: ...
