from datetime import datetime
from typing import Protocol

from src.domain.entities import (
    City,
    ClientDetail,
    Identity,
    LoginLogEntry,
    UserClient,
    UserStatus,
)
from src.domain.pagination import ListingResult, PageWindow


class UserStorePort(Protocol):
    def find_by_login_id(self, login_id: str) -> Identity | None:
        ...

    def list(self, window: PageWindow) -> ListingResult[Identity]:
        ...

    def create(self, identity: Identity) -> None:
        """Insert a new identity. Raises Conflict if the login ID exists."""
        ...

    def update_profile(self, identity: Identity) -> None:
        """Persist profile fields (name, contact, audit stamps)."""
        ...

    def update_status(
        self, login_id: str, status: UserStatus, *, actor: str, at: datetime
    ) -> None:
        ...

    def update_credential_digest(
        self, login_id: str, digest: str, *, actor: str, at: datetime
    ) -> None:
        ...

    def update_pin_digest(self, login_id: str, digest: str, *, actor: str, at: datetime) -> None:
        ...


class LogStorePort(Protocol):
    def list(self, window: PageWindow) -> ListingResult[LoginLogEntry]:
        ...


class ClientStorePort(Protocol):
    def list_for_login(self, login_id: str) -> list[UserClient]:
        """Clients assigned to login_id, ordered by client code."""
        ...

    def list_unassigned(self, code_fragment: str = "") -> list[ClientDetail]:
        """
        Clients assigned to no login ID, ordered by client code. A non-empty
        fragment keeps codes containing it (case-sensitive).
        """
        ...


class CityStorePort(Protocol):
    def list_all(self) -> list[City]:
        ...
