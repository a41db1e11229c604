from src.ports.repo import LogStorePort

__all__ = ["LogStorePort"]
