"""
Cities component unit tests.
"""

from src.adapters.memory_repos import InMemoryCityRepo
from src.components.cities import run_list_cities
from src.domain.entities import City


def test_cities_ordered_by_code() -> None:
    repo = InMemoryCityRepo(
        [
            City(city_code=3171, city_name="Jakarta Selatan"),
            City(city_code=1101, city_name="Simeulue"),
        ]
    )

    result = run_list_cities(city_repo=repo)

    assert [c.city_code for c in result.cities] == [1101, 3171]


def test_empty_reference_list() -> None:
    assert run_list_cities(city_repo=InMemoryCityRepo()).cities == []
