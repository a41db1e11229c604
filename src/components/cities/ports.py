from src.ports.repo import CityStorePort

__all__ = ["CityStorePort"]
