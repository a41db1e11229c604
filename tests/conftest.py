import sqlite3
from datetime import UTC, datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from src.adapters.auth.crypto import Sha1CredentialHasher
from src.adapters.sqlite.migrator import SQLiteMigrator
from src.api.main import create_app
from src.app_shell.config import Settings
from src.app_shell.context import ServiceContext
from src.domain.entities import Identity
from src.rules.models import AdminRules

TEST_SECRET = "test-signing-key-0123456789abcdef"
BASE_TIME = datetime(2024, 6, 15, 12, 0, 0, tzinfo=UTC)


class FakeClock:
    """Settable clock shared by the token service and the components."""

    def __init__(self, now: datetime | None = None) -> None:
        self._now = now or datetime.now(UTC).replace(microsecond=0)

    def now_utc(self) -> datetime:
        return self._now

    def advance(self, delta: timedelta) -> None:
        self._now = self._now + delta


@pytest.fixture
def settings(tmp_path):
    return Settings(data_dir=tmp_path, secret_key=TEST_SECRET, log_level="DEBUG")


@pytest.fixture
def db_path(settings):
    SQLiteMigrator(settings.db_path).run_migrations()
    return settings.db_path


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def test_ctx(settings, db_path, clock):
    """
    Full ServiceContext backed by a migrated temporary SQLite DB, with one
    administrator (ADMIN01 / admin123) and one trader (TRADER01 / trader123).
    """
    ctx = ServiceContext.create(settings, AdminRules(), clock=clock)
    hasher = Sha1CredentialHasher()
    for login_id, role, password in (
        ("ADMIN01", "ADMIN", "admin123"),
        ("TRADER01", "TRADER", "trader123"),
    ):
        ctx.user_repo.create(
            Identity(
                login_id=login_id,
                full_name=f"{login_id.title()} User",
                role_tag=role,
                credential_digest=hasher.digest(password),
                pin_digest=hasher.digest("123456"),
                email=f"{login_id.lower()}@example.com",
                created_at=BASE_TIME,
                updated_at=BASE_TIME,
            )
        )
    return ctx


@pytest.fixture
def client(test_ctx):
    app = create_app(context=test_ctx)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def admin_token(client):
    res = client.post("/api/auth/login", json={"loginID": "admin01", "password": "admin123"})
    assert res.status_code == 200
    return res.json()["data"]["token"]


@pytest.fixture
def auth_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}


def _insert_login_log(
    db_path: str, login_id: str, action_date: datetime, status: str = "SUCCESS"
) -> None:
    conn = sqlite3.connect(db_path)
    conn.execute(
        "INSERT INTO login_logs "
        "(login_id, status, action_date, channel_media, channel_device, ip_address) "
        "VALUES (?, ?, ?, 'WEB', 'Chrome', '10.0.0.1')",
        (login_id, status, action_date.astimezone(UTC).isoformat(timespec="microseconds")),
    )
    conn.commit()
    conn.close()


@pytest.fixture
def insert_login_log():
    """Login history is written by the trading platform; tests seed it directly."""
    return _insert_login_log


CLIENTS = [
    ("AB001", "Andi Budiman"),
    ("AB002", "Ayu Bestari"),
    ("CD001", "Citra Dewi"),
    ("ab003", "Agus Bakti"),
]
CITIES = [
    (3171, "Jakarta Selatan", "31", "DKI Jakarta"),
    (1101, "Simeulue", "11", "Aceh"),
]


def _seed_reference_data(db_path: str) -> None:
    conn = sqlite3.connect(db_path)
    conn.executemany("INSERT INTO clients (client_code, client_name) VALUES (?, ?)", CLIENTS)
    conn.executemany(
        "INSERT INTO user_clients (login_id, client_code, created_at, created_by) "
        "VALUES ('TRADER01', ?, ?, 'ADMIN01')",
        [(code, BASE_TIME.isoformat(timespec="microseconds")) for code in ("CD001", "AB002")],
    )
    conn.executemany(
        "INSERT INTO cities (city_code, city_name, province_code, province_name) "
        "VALUES (?, ?, ?, ?)",
        CITIES,
    )
    conn.commit()
    conn.close()


@pytest.fixture
def seed_reference_data():
    """
    Client master list and cities come from the trading platform. Seeds four
    clients (CD001 and AB002 assigned to TRADER01) and two cities.
    """
    return _seed_reference_data
