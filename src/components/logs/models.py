from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from src.domain.entities import LoginLogEntry


@dataclass(frozen=True)
class ListLogsInput:
    page: Any = None
    size: Any = None
    keyword: str | None = None


@dataclass(frozen=True)
class LogListOutput:
    entries: list[LoginLogEntry]
    page: int
    size: int
    total: int
