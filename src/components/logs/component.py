"""
Logs component - read-only login history listing.

Entries are ordered newest first and filtered by login ID substring.
"""

from __future__ import annotations

from src.domain.pagination import DEFAULT_SIZE, PageWindow

from .models import ListLogsInput, LogListOutput
from .ports import LogStorePort


def run_list_logs(
    inp: ListLogsInput,
    *,
    log_repo: LogStorePort,
    default_size: int = DEFAULT_SIZE,
) -> LogListOutput:
    window = PageWindow.from_page(inp.page, inp.size, inp.keyword, default_size=default_size)
    result = log_repo.list(window)
    return LogListOutput(
        entries=result.rows,
        page=window.page,
        size=window.size,
        total=result.total,
    )
