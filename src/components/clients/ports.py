"""
Clients component port definitions.
"""

from src.ports.repo import ClientStorePort

__all__ = ["ClientStorePort"]
