from __future__ import annotations

import logging
from dataclasses import dataclass
from src.adapters.auth.crypto import build_hasher
from src.adapters.auth.tokens import JWTTokenService, generate_signing_key
from src.adapters.clock import SystemClock
from src.adapters.sqlite.repos import (
    SQLiteCityRepo,
    SQLiteClientRepo,
    SQLiteLoginLogRepo,
    SQLiteUserRepo,
)
from src.app_shell.config import Settings
from src.ports.auth import CredentialHasherPort
from src.ports.clock import ClockPort
from src.ports.repo import CityStorePort, ClientStorePort, LogStorePort, UserStorePort
from src.rules.models import AdminRules

logger = logging.getLogger(__name__)


@dataclass
class ServiceContext:
    """Collaborators built once at process start and shared by every request."""

    settings: Settings
    rules: AdminRules
    user_repo: UserStorePort
    log_repo: LogStorePort
    client_repo: ClientStorePort
    city_repo: CityStorePort
    hasher: CredentialHasherPort
    token_service: JWTTokenService
    clock: ClockPort

    @classmethod
    def create(
        cls,
        settings: Settings,
        rules: AdminRules,
        *,
        clock: ClockPort | None = None,
        user_repo: UserStorePort | None = None,
        log_repo: LogStorePort | None = None,
        client_repo: ClientStorePort | None = None,
        city_repo: CityStorePort | None = None,
    ) -> ServiceContext:
        clock = clock or SystemClock()

        if settings.secret_key:
            signing_key = settings.secret_key
            logger.info("Using configured signing key")
        else:
            # Tokens from earlier runs of the process will not validate.
            signing_key = generate_signing_key()
            logger.warning("No ADMIN_SECRET_KEY set; generated a process-local signing key")

        token_service = JWTTokenService(
            signing_key,
            admin_role=rules.auth.admin_role,
            algorithm=rules.auth.token_algorithm,
            clock=clock,
        )

        return cls(
            settings=settings,
            rules=rules,
            user_repo=user_repo or SQLiteUserRepo(settings.db_path),
            log_repo=log_repo or SQLiteLoginLogRepo(settings.db_path),
            client_repo=client_repo or SQLiteClientRepo(settings.db_path),
            city_repo=city_repo or SQLiteCityRepo(settings.db_path),
            hasher=build_hasher(rules.auth.credential_scheme),
            token_service=token_service,
            clock=clock,
        )
