"""
Cities component - city reference data.
"""

from .component import run_list_cities
from .models import CityListOutput
from .ports import CityStorePort

__all__ = [
    "run_list_cities",
    "CityListOutput",
    "CityStorePort",
]
