"""In-memory user, login-log, client and city stores.

Suitable for single-process dev setups and tests. Listing goes through the
same rank/window engine as the SQLite stores; insertion order stands in for
storage order.
"""

from datetime import datetime

from src.domain import pagination
from src.domain.entities import (
    City,
    ClientDetail,
    Identity,
    LoginLogEntry,
    UserClient,
    UserStatus,
)
from src.domain.errors import Conflict, NotFound
from src.domain.pagination import ListingResult, PageWindow


class InMemoryUserRepo:
    def __init__(self) -> None:
        self._users: dict[str, Identity] = {}

    def find_by_login_id(self, login_id: str) -> Identity | None:
        user = self._users.get(login_id)
        return user.model_copy() if user else None

    def list(self, window: PageWindow) -> ListingResult[Identity]:
        return pagination.window(
            self._users.values(),
            pagination.user_keyword_filter(window.keyword),
            lambda u: u.created_at,
            window.offset,
            window.size,
        )

    def create(self, identity: Identity) -> None:
        if identity.login_id in self._users:
            raise Conflict(f"Login ID {identity.login_id} already registered")
        self._users[identity.login_id] = identity.model_copy()

    def update_profile(self, identity: Identity) -> None:
        current = self._get(identity.login_id)
        self._users[identity.login_id] = current.model_copy(
            update={
                "full_name": identity.full_name,
                "email": identity.email,
                "phone": identity.phone,
                "city": identity.city,
                "updated_at": identity.updated_at,
                "updated_by": identity.updated_by,
            }
        )

    def update_status(
        self, login_id: str, status: UserStatus, *, actor: str, at: datetime
    ) -> None:
        self._set(login_id, "status", status, actor=actor, at=at)

    def update_credential_digest(
        self, login_id: str, digest: str, *, actor: str, at: datetime
    ) -> None:
        self._set(login_id, "credential_digest", digest, actor=actor, at=at)

    def update_pin_digest(self, login_id: str, digest: str, *, actor: str, at: datetime) -> None:
        self._set(login_id, "pin_digest", digest, actor=actor, at=at)

    def _get(self, login_id: str) -> Identity:
        user = self._users.get(login_id)
        if user is None:
            raise NotFound(f"User {login_id} not found")
        return user

    def _set(self, login_id: str, field: str, value: str, *, actor: str, at: datetime) -> None:
        current = self._get(login_id)
        self._users[login_id] = current.model_copy(
            update={field: value, "updated_at": at, "updated_by": actor}
        )


class InMemoryLoginLogRepo:
    def __init__(self, entries: list[LoginLogEntry] | None = None) -> None:
        self._entries: list[LoginLogEntry] = list(entries or [])

    def add(self, entry: LoginLogEntry) -> None:
        """Seed an entry; the admin surface never writes login history."""
        self._entries.append(entry)

    def list(self, window: PageWindow) -> ListingResult[LoginLogEntry]:
        return pagination.window(
            self._entries,
            pagination.log_keyword_filter(window.keyword),
            lambda e: e.action_date,
            window.offset,
            window.size,
            descending=True,
        )


class InMemoryClientRepo:
    def __init__(self) -> None:
        self._clients: dict[str, ClientDetail] = {}
        self._assignments: list[UserClient] = []

    def add_client(self, client: ClientDetail) -> None:
        self._clients[client.client_code] = client

    def assign(self, login_id: str, client_code: str, *, actor: str, at: datetime) -> None:
        """Seed an assignment; the admin surface only reads them."""
        if client_code not in self._clients:
            raise NotFound(f"Client {client_code} not found")
        self._assignments.append(
            UserClient(
                login_id=login_id,
                client_code=client_code,
                client_name=self._clients[client_code].client_name,
                created_at=at,
                created_by=actor,
            )
        )

    def list_for_login(self, login_id: str) -> list[UserClient]:
        found = [a for a in self._assignments if a.login_id == login_id]
        return sorted(found, key=lambda a: a.client_code)

    def list_unassigned(self, code_fragment: str = "") -> list[ClientDetail]:
        assigned = {a.client_code for a in self._assignments}
        return [
            client
            for code, client in sorted(self._clients.items())
            if code not in assigned and code_fragment in code
        ]


class InMemoryCityRepo:
    def __init__(self, cities: list[City] | None = None) -> None:
        self._cities = list(cities or [])

    def list_all(self) -> list[City]:
        return sorted(self._cities, key=lambda c: c.city_code)
