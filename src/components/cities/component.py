"""
Cities component - city reference list used by user profiles.
"""

from .models import CityListOutput
from .ports import CityStorePort


def run_list_cities(*, city_repo: CityStorePort) -> CityListOutput:
    return CityListOutput(cities=city_repo.list_all())
