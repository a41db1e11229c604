"""
Clients component - client account lookups.
"""

from .component import run_list_unassigned_clients, run_list_user_clients, run_search_clients
from .models import ClientListOutput, ListUserClientsInput, SearchClientsInput, UserClientsOutput
from .ports import ClientStorePort

__all__ = [
    # Entry points
    "run_list_unassigned_clients",
    "run_list_user_clients",
    "run_search_clients",
    # Input models
    "ListUserClientsInput",
    "SearchClientsInput",
    # Output models
    "ClientListOutput",
    "UserClientsOutput",
    # Ports
    "ClientStorePort",
]
