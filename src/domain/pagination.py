"""
Paginated query engine.

Rows matching a filter are ranked 1..n under an ordering key (ties keep
storage order) and the window keeps ranks in (offset, offset + size].
The total is the number of matching rows, independent of the window.

The SQLite stores render the same algorithm in SQL
(see src/adapters/sqlite/pagination.py); this module is the in-memory form
and the shared window/result types.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from src.domain.entities import Identity, LoginLogEntry
from src.domain.errors import ValidationFailed

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_SIZE = 10

# Largest rank SQLite can bind as INTEGER.
MAX_RANK = 2**63 - 1


def _coerce_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True)
class PageWindow:
    """A listing request: 0-based offset, page size and filter keyword."""

    offset: int = 0
    size: int = DEFAULT_SIZE
    keyword: str = ""

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValidationFailed("offset must be >= 0", field="offset")
        if self.size < 1:
            raise ValidationFailed("size must be >= 1", field="size")
        if self.offset + self.size > MAX_RANK:
            raise ValidationFailed("page is out of range", field="page")

    @property
    def page(self) -> int:
        return self.offset // self.size + 1

    @classmethod
    def from_page(
        cls,
        page: Any = None,
        size: Any = None,
        keyword: str | None = None,
        *,
        default_size: int = DEFAULT_SIZE,
    ) -> PageWindow:
        """
        Build a window from client-supplied 1-based page and size.

        Missing, non-numeric or non-positive values fall back to
        page=1 and size=default_size. Oversized values are clamped so the
        last rank of the window stays within MAX_RANK; such a page lies past
        the last row and comes back empty.
        """
        page_no = _coerce_int(page)
        if page_no is None or page_no < 1:
            page_no = DEFAULT_PAGE

        page_size = _coerce_int(size)
        if page_size is None or page_size < 1:
            page_size = default_size
        page_size = min(page_size, MAX_RANK)
        page_no = min(page_no, MAX_RANK // page_size)

        return cls(
            offset=(page_no - 1) * page_size,
            size=page_size,
            keyword=keyword or "",
        )


@dataclass(frozen=True)
class ListingResult(Generic[T]):
    rows: list[T] = field(default_factory=list)
    total: int = 0


def rank_rows(
    rows: Iterable[T],
    order_key: Callable[[T], Any],
    *,
    descending: bool = False,
) -> list[tuple[int, T]]:
    """Assign 1-based ranks; sorted() is stable so ties keep input order."""
    ordered = sorted(rows, key=order_key, reverse=descending)
    return list(enumerate(ordered, start=1))


def window(
    rows: Iterable[T],
    predicate: Callable[[T], bool],
    order_key: Callable[[T], Any],
    offset: int,
    size: int,
    *,
    descending: bool = False,
) -> ListingResult[T]:
    if offset < 0:
        raise ValidationFailed("offset must be >= 0", field="offset")
    if size < 1:
        raise ValidationFailed("size must be >= 1", field="size")

    matching = [row for row in rows if predicate(row)]
    ranked = rank_rows(matching, order_key, descending=descending)
    picked = [row for rank, row in ranked if offset < rank <= offset + size]
    return ListingResult(rows=picked, total=len(matching))


# --- Filter predicates ---


def user_keyword_filter(keyword: str) -> Callable[[Identity], bool]:
    """Full name or email contains keyword (case-sensitive)."""

    def _match(user: Identity) -> bool:
        if not keyword:
            return True
        return keyword in user.full_name or keyword in (user.email or "")

    return _match


def log_keyword_filter(keyword: str) -> Callable[[LoginLogEntry], bool]:
    """Login identifier contains keyword (case-sensitive)."""

    def _match(entry: LoginLogEntry) -> bool:
        return keyword in entry.login_id

    return _match
