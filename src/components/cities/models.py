from __future__ import annotations

from dataclasses import dataclass

from src.domain.entities import City


@dataclass(frozen=True)
class CityListOutput:
    cities: list[City]
