from datetime import UTC, datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from src.adapters.sqlite.repos import SQLiteLoginLogRepo
from src.api.main import create_app
from src.app_shell.context import ServiceContext
from src.domain.pagination import MAX_RANK
from src.rules.models import AdminRules

BASE = datetime(2024, 6, 15, 8, 0, 0, tzinfo=UTC)


@pytest.fixture
def seeded_logs(test_ctx, insert_login_log):
    for i in range(15):
        login_id = "TRADER01" if i % 3 else "ADMIN01"
        insert_login_log(test_ctx.settings.db_path, login_id, BASE + timedelta(minutes=i))


def test_requires_session(client):
    res = client.get("/api/logs")
    assert res.status_code == 401


def test_list_logs_newest_first(client, auth_headers, seeded_logs):
    res = client.get("/api/logs?size=4", headers=auth_headers)

    assert res.status_code == 200
    body = res.json()
    assert body["message"] == "Login logs retrieved successfully"
    data = body["data"]
    dates = [datetime.fromisoformat(e["action_date"]) for e in data["logs"]]
    assert dates == [BASE + timedelta(minutes=m) for m in (14, 13, 12, 11)]
    assert data["total"] == 15


def test_list_logs_last_page(client, auth_headers, seeded_logs):
    data = client.get("/api/logs?page=4&size=4", headers=auth_headers).json()["data"]

    assert len(data["logs"]) == 3
    assert data["page"] == 4


def test_list_logs_huge_size(client, auth_headers, seeded_logs):
    res = client.get(f"/api/logs?size={10**19}", headers=auth_headers)

    assert res.status_code == 200
    data = res.json()["data"]
    assert len(data["logs"]) == 15
    assert data["total"] == 15
    assert (data["page"], data["size"]) == (1, MAX_RANK)


def test_list_logs_page_past_int_range(client, auth_headers, seeded_logs):
    res = client.get(f"/api/logs?page={10**18}&size=4", headers=auth_headers)

    assert res.status_code == 200
    data = res.json()["data"]
    assert data["logs"] == []
    assert data["total"] == 15


def test_list_logs_keyword(client, auth_headers, seeded_logs):
    data = client.get("/api/logs?keyword=ADMIN", headers=auth_headers).json()["data"]

    assert data["total"] == 5
    assert {e["login_id"] for e in data["logs"]} == {"ADMIN01"}


def test_list_logs_empty(client, auth_headers):
    data = client.get("/api/logs", headers=auth_headers).json()["data"]
    assert data == {"logs": [], "page": 1, "size": 10, "total": 0}


def test_store_unavailable(settings, tmp_path, clock):
    ctx = ServiceContext.create(
        settings,
        AdminRules(),
        clock=clock,
        log_repo=SQLiteLoginLogRepo(str(tmp_path / "absent" / "logs.db")),
    )
    token = ctx.token_service.issue("ADMIN01", "ADMIN")

    with TestClient(create_app(context=ctx)) as c:
        res = c.get("/api/logs", headers={"Authorization": f"Bearer {token}"})

    assert res.status_code == 503
    assert res.json()["code"] == "store_unavailable"
