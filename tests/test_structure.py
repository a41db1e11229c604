"""
Structure lint tests: components follow the component/models/ports layout.
"""

from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
COMPONENTS_DIR = PROJECT_ROOT / "src" / "components"
COMPONENTS = ["auth", "users", "logs", "clients", "cities"]


class TestProjectStructure:
    def test_core_directories_exist(self) -> None:
        for name in ("domain", "ports", "adapters", "components", "api", "rules", "app_shell"):
            assert (PROJECT_ROOT / "src" / name).is_dir(), name

    def test_migrations_exist(self) -> None:
        assert sorted(p.name for p in (PROJECT_ROOT / "migrations").glob("*.sql"))

    def test_rules_file_exists(self) -> None:
        assert (PROJECT_ROOT / "admin.yaml").is_file()


@pytest.mark.parametrize("component", COMPONENTS)
class TestComponentLayout:
    def test_required_modules(self, component: str) -> None:
        base = COMPONENTS_DIR / component
        for module in ("__init__.py", "component.py", "models.py", "ports.py"):
            assert (base / module).is_file(), f"{component}/{module}"

    def test_has_unit_tests(self, component: str) -> None:
        assert (COMPONENTS_DIR / component / "tests" / "test_unit.py").is_file()

    def test_no_framework_imports(self, component: str) -> None:
        """Components stay independent of the HTTP layer and concrete adapters."""
        for path in (COMPONENTS_DIR / component).glob("*.py"):
            source = path.read_text()
            assert "fastapi" not in source, path
            assert "src.adapters" not in source, path
            assert "sqlite3" not in source, path
