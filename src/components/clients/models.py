from __future__ import annotations

from dataclasses import dataclass

from src.domain.entities import ClientDetail, UserClient


@dataclass(frozen=True)
class ListUserClientsInput:
    login_id: str | None = None


@dataclass(frozen=True)
class SearchClientsInput:
    client_code: str | None = None


@dataclass(frozen=True)
class UserClientsOutput:
    login_id: str
    clients: list[UserClient]


@dataclass(frozen=True)
class ClientListOutput:
    clients: list[ClientDetail]
