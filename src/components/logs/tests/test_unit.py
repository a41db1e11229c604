"""
Logs component unit tests.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from src.adapters.memory_repos import InMemoryLoginLogRepo
from src.components.logs import ListLogsInput, run_list_logs
from src.domain.entities import LoginLogEntry

BASE_TIME = datetime(2024, 6, 15, 8, 0, 0, tzinfo=UTC)


def entry(login_id: str, minutes: int, status: str = "SUCCESS") -> LoginLogEntry:
    return LoginLogEntry(
        login_id=login_id,
        status=status,
        action_date=BASE_TIME + timedelta(minutes=minutes),
        channel_media="WEB",
        channel_device="Chrome",
        ip_address="10.0.0.1",
    )


@pytest.fixture
def log_repo() -> InMemoryLoginLogRepo:
    repo = InMemoryLoginLogRepo()
    for i in range(12):
        repo.add(entry("TRADER01" if i % 2 else "TRADER02", i))
    return repo


class TestListLogs:
    def test_newest_first(self, log_repo: InMemoryLoginLogRepo) -> None:
        result = run_list_logs(ListLogsInput(page=1, size=3), log_repo=log_repo)

        assert [e.action_date for e in result.entries] == [
            BASE_TIME + timedelta(minutes=m) for m in (11, 10, 9)
        ]
        assert result.total == 12

    def test_second_page(self, log_repo: InMemoryLoginLogRepo) -> None:
        result = run_list_logs(ListLogsInput(page=2, size=5), log_repo=log_repo)

        assert [e.action_date.minute for e in result.entries] == [6, 5, 4, 3, 2]
        assert result.page == 2
        assert result.size == 5

    def test_keyword_filters_login_id(self, log_repo: InMemoryLoginLogRepo) -> None:
        result = run_list_logs(ListLogsInput(keyword="01"), log_repo=log_repo)

        assert result.total == 6
        assert all(e.login_id == "TRADER01" for e in result.entries)

    def test_no_match(self, log_repo: InMemoryLoginLogRepo) -> None:
        result = run_list_logs(ListLogsInput(keyword="trader"), log_repo=log_repo)

        assert result.entries == []
        assert result.total == 0

    def test_default_size_applies(self, log_repo: InMemoryLoginLogRepo) -> None:
        result = run_list_logs(ListLogsInput(size="bad"), log_repo=log_repo, default_size=4)

        assert result.size == 4
        assert len(result.entries) == 4

    def test_empty_history(self) -> None:
        result = run_list_logs(ListLogsInput(), log_repo=InMemoryLoginLogRepo())

        assert result.entries == []
        assert result.total == 0
        assert result.page == 1
