import builtins
import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime
from typing import Any

from src.adapters.sqlite.pagination import (
    LOG_KEYWORD_WHERE,
    USER_KEYWORD_WHERE,
    WindowQuery,
    fetch_window,
    log_keyword_params,
    user_keyword_params,
)
from src.domain.entities import (
    City,
    ClientDetail,
    Identity,
    LoginLogEntry,
    UserClient,
    UserStatus,
)
from src.domain.errors import Conflict, NotFound, StoreUnavailable
from src.domain.pagination import ListingResult, PageWindow

logger = logging.getLogger(__name__)


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


def to_db_dt(dt: datetime | None) -> str | None:
    """UTC ISO-8601 with fixed precision so text ordering matches time ordering."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC).isoformat(timespec="microseconds")


def parse_dt(s: str | None) -> datetime | None:
    return datetime.fromisoformat(s) if s else None


class SQLiteRepoBase:
    def __init__(self, db_path: str):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        conn.execute("PRAGMA foreign_keys = ON;")
        return conn

    @contextmanager
    def _connection(self, operation: str) -> Iterator[sqlite3.Connection]:
        """Open a connection for one operation; sqlite errors become StoreUnavailable."""
        try:
            conn = self._get_conn()
        except sqlite3.Error as e:
            logger.error("Cannot open %s for %s: %s", self.db_path, operation, e)
            raise StoreUnavailable(f"{operation} failed: database unavailable") from e
        try:
            yield conn
        except sqlite3.IntegrityError:
            conn.rollback()
            raise
        except sqlite3.Error as e:
            conn.rollback()
            logger.error("%s failed: %s", operation, e)
            raise StoreUnavailable(f"{operation} failed") from e
        finally:
            conn.close()


USER_LISTING = WindowQuery(
    table="admin_users",
    columns=(
        "login_id",
        "full_name",
        "role_tag",
        "credential_digest",
        "pin_digest",
        "status",
        "email",
        "phone",
        "city",
        "last_login",
        "created_at",
        "updated_at",
        "created_by",
        "updated_by",
    ),
    where=USER_KEYWORD_WHERE,
    order_by="created_at",
)


class SQLiteUserRepo(SQLiteRepoBase):
    def find_by_login_id(self, login_id: str) -> Identity | None:
        with self._connection("find user") as conn:
            row = conn.execute(
                "SELECT * FROM admin_users WHERE login_id = ?", (login_id,)
            ).fetchone()
            if not row:
                return None
            return self._map_row_to_identity(row)

    def list(self, window: PageWindow) -> ListingResult[Identity]:
        with self._connection("list users") as conn:
            rows, total = fetch_window(
                conn, USER_LISTING, user_keyword_params(window.keyword), window
            )
            return ListingResult(
                rows=[self._map_row_to_identity(row) for row in rows], total=total
            )

    def create(self, identity: Identity) -> None:
        try:
            with self._connection("create user") as conn:
                conn.execute(
                    """
                    INSERT INTO admin_users (
                        login_id, full_name, role_tag, credential_digest, pin_digest,
                        status, email, phone, city, last_login,
                        created_at, updated_at, created_by, updated_by
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                    (
                        identity.login_id,
                        identity.full_name,
                        identity.role_tag,
                        identity.credential_digest,
                        identity.pin_digest,
                        identity.status,
                        identity.email,
                        identity.phone,
                        identity.city,
                        to_db_dt(identity.last_login),
                        to_db_dt(identity.created_at),
                        to_db_dt(identity.updated_at),
                        identity.created_by,
                        identity.updated_by,
                    ),
                )
                conn.commit()
        except sqlite3.IntegrityError as e:
            raise Conflict(f"Login ID {identity.login_id} already registered") from e

    def update_profile(self, identity: Identity) -> None:
        with self._connection("update user") as conn:
            cursor = conn.execute(
                """
                UPDATE admin_users
                SET full_name = ?, email = ?, phone = ?, city = ?,
                    updated_at = ?, updated_by = ?
                WHERE login_id = ?
            """,
                (
                    identity.full_name,
                    identity.email,
                    identity.phone,
                    identity.city,
                    to_db_dt(identity.updated_at),
                    identity.updated_by,
                    identity.login_id,
                ),
            )
            self._require_row(cursor, identity.login_id)
            conn.commit()

    def update_status(
        self, login_id: str, status: UserStatus, *, actor: str, at: datetime
    ) -> None:
        self._update_column("status", login_id, status, actor=actor, at=at)

    def update_credential_digest(
        self, login_id: str, digest: str, *, actor: str, at: datetime
    ) -> None:
        self._update_column("credential_digest", login_id, digest, actor=actor, at=at)

    def update_pin_digest(self, login_id: str, digest: str, *, actor: str, at: datetime) -> None:
        self._update_column("pin_digest", login_id, digest, actor=actor, at=at)

    def _update_column(
        self, column: str, login_id: str, value: str, *, actor: str, at: datetime
    ) -> None:
        # column comes from the fixed set above, never from callers
        with self._connection(f"update {column}") as conn:
            cursor = conn.execute(
                f"UPDATE admin_users SET {column} = ?, updated_at = ?, updated_by = ? "
                "WHERE login_id = ?",
                (value, to_db_dt(at), actor, login_id),
            )
            self._require_row(cursor, login_id)
            conn.commit()

    @staticmethod
    def _require_row(cursor: sqlite3.Cursor, login_id: str) -> None:
        if cursor.rowcount == 0:
            raise NotFound(f"User {login_id} not found")

    def _map_row_to_identity(self, row: dict[str, Any]) -> Identity:
        return Identity(
            login_id=row["login_id"],
            full_name=row["full_name"],
            role_tag=row["role_tag"],
            credential_digest=row["credential_digest"],
            pin_digest=row["pin_digest"],
            status=row["status"],
            email=row["email"],
            phone=row["phone"],
            city=row["city"],
            last_login=parse_dt(row["last_login"]),
            created_at=parse_dt(row["created_at"]) or datetime.min.replace(tzinfo=UTC),
            updated_at=parse_dt(row["updated_at"]) or datetime.min.replace(tzinfo=UTC),
            created_by=row["created_by"],
            updated_by=row["updated_by"],
        )


LOG_LISTING = WindowQuery(
    table="login_logs",
    columns=(
        "login_id",
        "status",
        "action_date",
        "channel_media",
        "channel_device",
        "ip_address",
    ),
    where=LOG_KEYWORD_WHERE,
    order_by="action_date DESC",
)


class SQLiteLoginLogRepo(SQLiteRepoBase):
    """Read-only access to the login history table."""

    def list(self, window: PageWindow) -> ListingResult[LoginLogEntry]:
        with self._connection("list login logs") as conn:
            rows, total = fetch_window(
                conn, LOG_LISTING, log_keyword_params(window.keyword), window
            )
            entries: builtins.list[LoginLogEntry] = [
                LoginLogEntry(
                    login_id=row["login_id"],
                    status=row["status"],
                    action_date=datetime.fromisoformat(row["action_date"]),
                    channel_media=row["channel_media"],
                    channel_device=row["channel_device"],
                    ip_address=row["ip_address"],
                )
                for row in rows
            ]
            return ListingResult(rows=entries, total=total)


class SQLiteClientRepo(SQLiteRepoBase):
    """Client master list and client-to-login assignments."""

    def list_for_login(self, login_id: str) -> list[UserClient]:
        with self._connection("list user clients") as conn:
            rows = conn.execute(
                """
                SELECT uc.login_id, uc.client_code, c.client_name,
                       uc.created_at, uc.created_by
                FROM user_clients uc
                LEFT JOIN clients c ON c.client_code = uc.client_code
                WHERE uc.login_id = ?
                ORDER BY uc.client_code
            """,
                (login_id,),
            ).fetchall()
            return [
                UserClient(
                    login_id=row["login_id"],
                    client_code=row["client_code"],
                    client_name=row["client_name"],
                    created_at=datetime.fromisoformat(row["created_at"]),
                    created_by=row["created_by"],
                )
                for row in rows
            ]

    def list_unassigned(self, code_fragment: str = "") -> list[ClientDetail]:
        with self._connection("list unassigned clients") as conn:
            rows = conn.execute(
                """
                SELECT client_code, client_name FROM clients
                WHERE client_code NOT IN (SELECT client_code FROM user_clients)
                  AND (? = '' OR instr(client_code, ?) > 0)
                ORDER BY client_code
            """,
                (code_fragment, code_fragment),
            ).fetchall()
            return [ClientDetail(**row) for row in rows]


class SQLiteCityRepo(SQLiteRepoBase):
    def list_all(self) -> list[City]:
        with self._connection("list cities") as conn:
            rows = conn.execute(
                "SELECT city_code, city_name FROM cities ORDER BY city_code"
            ).fetchall()
            return [City(**row) for row in rows]
