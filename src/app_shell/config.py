import logging
import os
from pathlib import Path

from src.rules.models import AdminRules

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings:
    """Process settings from the environment; explicit arguments win."""

    def __init__(
        self,
        data_dir: str | Path | None = None,
        rules_path: str | Path | None = None,
        secret_key: str | None = None,
        log_level: str | None = None,
    ) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(data_dir or os.environ.get("ADMIN_DATA_DIR", "./data"))
        self.db_path = str(self.data_dir / "admin.db")
        self.rules_path = Path(
            rules_path or os.environ.get("ADMIN_RULES_PATH", str(self.base_dir / "admin.yaml"))
        )
        self.secret_key = secret_key or os.environ.get("ADMIN_SECRET_KEY") or None
        self.log_level = (log_level or os.environ.get("ADMIN_LOG_LEVEL", "INFO")).upper()


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)


def validate_ops_rules(rules: AdminRules, settings: Settings) -> None:
    """
    Validate operational requirements before startup.
    Raises ValueError listing every problem found.
    """
    problems = []

    missing = [name for name in rules.ops.required_env if name not in os.environ]
    if missing:
        problems.append(f"Missing required environment variables: {', '.join(missing)}")

    if settings.data_dir.exists() and not settings.data_dir.is_dir():
        problems.append(f"Data path is not a directory: {settings.data_dir}")

    if problems:
        for problem in problems:
            logger.critical(problem)
        raise ValueError("; ".join(problems))

    logger.info("Configuration validated.")
