"""
SQL rendition of the paginated query engine.

Ranks come from ROW_NUMBER() over the filtered rows, ordered by the
listing's key with rowid as the tie-breaker, so the window is
rank > offset AND rank <= offset + size. The total is a separate COUNT(*)
under the same filter.
"""

from __future__ import annotations

import sqlite3
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from src.domain.pagination import PageWindow


@dataclass(frozen=True)
class WindowQuery:
    table: str
    columns: tuple[str, ...]
    where: str
    order_by: str

    def select_sql(self) -> str:
        cols = ", ".join(self.columns)
        return f"""
            SELECT {cols}
            FROM (
                SELECT {cols},
                       ROW_NUMBER() OVER (ORDER BY {self.order_by}, rowid) AS rnum
                FROM {self.table}
                WHERE {self.where}
            )
            WHERE rnum > ? AND rnum <= ?
            ORDER BY rnum
        """

    def count_sql(self) -> str:
        return f"SELECT COUNT(*) AS cnt FROM {self.table} WHERE {self.where}"


def fetch_window(
    conn: sqlite3.Connection,
    query: WindowQuery,
    params: Sequence[Any],
    window: PageWindow,
) -> tuple[list[dict[str, Any]], int]:
    """Return (rows in window, total matching). Rows are dicts (dict_factory)."""
    rows = conn.execute(
        query.select_sql(), (*params, window.offset, window.offset + window.size)
    ).fetchall()

    row = conn.execute(query.count_sql(), tuple(params)).fetchone()
    total = row["cnt"] if row else 0
    return rows, total


# Case-sensitive substring match; instr() does not fold case the way LIKE does.
USER_KEYWORD_WHERE = (
    "(? = '' OR instr(full_name, ?) > 0 OR instr(COALESCE(email, ''), ?) > 0)"
)
LOG_KEYWORD_WHERE = "(? = '' OR instr(login_id, ?) > 0)"


def user_keyword_params(keyword: str) -> tuple[str, str, str]:
    return (keyword, keyword, keyword)


def log_keyword_params(keyword: str) -> tuple[str, str]:
    return (keyword, keyword)
