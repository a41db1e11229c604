"""
Clients component - client account lookups for user administration.

Shows which client accounts a login ID holds and which accounts are still
free to hand out. An account assigned to any login ID is never listed as
free. Code searches match a case-sensitive substring of the client code.
"""

from __future__ import annotations

import logging

from src.domain.entities import normalize_login_id
from src.domain.errors import ValidationFailed

from .models import (
    ClientListOutput,
    ListUserClientsInput,
    SearchClientsInput,
    UserClientsOutput,
)
from .ports import ClientStorePort

logger = logging.getLogger(__name__)


def run_list_user_clients(
    inp: ListUserClientsInput, *, client_repo: ClientStorePort
) -> UserClientsOutput:
    login_id = normalize_login_id(inp.login_id or "")
    if not login_id:
        raise ValidationFailed("Login ID is required", field="login_id")
    return UserClientsOutput(login_id=login_id, clients=client_repo.list_for_login(login_id))


def run_list_unassigned_clients(*, client_repo: ClientStorePort) -> ClientListOutput:
    return ClientListOutput(clients=client_repo.list_unassigned())


def run_search_clients(
    inp: SearchClientsInput, *, client_repo: ClientStorePort
) -> ClientListOutput:
    fragment = (inp.client_code or "").strip()
    if not fragment:
        raise ValidationFailed("Client ID is required", field="client_id")

    clients = client_repo.list_unassigned(fragment)
    logger.debug("Client search %r matched %d unassigned client(s)", fragment, len(clients))
    return ClientListOutput(clients=clients)
