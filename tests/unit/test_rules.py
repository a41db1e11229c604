from pathlib import Path

import pytest

from src.rules.loader import load_rules
from src.rules.models import AdminRules


def write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "admin.yaml"
    path.write_text(text)
    return path


def test_project_rules_load() -> None:
    rules = load_rules(Path("admin.yaml").resolve())

    assert rules.auth.admin_role == "ADMIN"
    assert rules.auth.credential_scheme == "sha1"
    assert rules.pagination.default_size == 10


def test_empty_file_uses_defaults(tmp_path: Path) -> None:
    assert load_rules(write(tmp_path, "")) == AdminRules()


def test_partial_override(tmp_path: Path) -> None:
    rules = load_rules(write(tmp_path, "auth:\n  min_password_length: 8\npagination:\n  default_size: 25\n"))

    assert rules.auth.min_password_length == 8
    assert rules.auth.admin_role == "ADMIN"
    assert rules.pagination.default_size == 25


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_rules(tmp_path / "nope.yaml")


def test_invalid_yaml(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Invalid YAML"):
        load_rules(write(tmp_path, "auth: [unclosed"))


def test_unknown_scheme(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Rules validation failed"):
        load_rules(write(tmp_path, "auth:\n  credential_scheme: md5\n"))


def test_non_positive_page_size(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        load_rules(write(tmp_path, "pagination:\n  default_size: 0\n"))


@pytest.mark.parametrize("key", ["pin_length: 4", "token_ttl_minutes: 15"])
def test_fixed_auth_values_are_not_rules(tmp_path: Path, key: str) -> None:
    with pytest.raises(ValueError, match="Rules validation failed"):
        load_rules(write(tmp_path, f"auth:\n  {key}\n"))
