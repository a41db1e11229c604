import argparse
import logging
import sys

from src.adapters.sqlite.migrator import SQLiteMigrator
from src.app_shell.config import Settings, configure_logging, validate_ops_rules
from src.app_shell.context import ServiceContext
from src.components.users import CreateUserInput, run_create_user
from src.domain.errors import AdminError, MigrationFailed
from src.rules.loader import load_rules

logger = logging.getLogger("cli")


def get_context(settings: Settings) -> ServiceContext:
    if not settings.rules_path.exists():
        logger.error("Rules file %s not found.", settings.rules_path)
        sys.exit(1)

    rules = load_rules(settings.rules_path)
    validate_ops_rules(rules, settings)
    return ServiceContext.create(settings, rules)


def handle_migrate(settings: Settings, args: argparse.Namespace) -> None:
    migrator = SQLiteMigrator(settings.db_path)
    try:
        pending = migrator.pending()
        if not pending:
            print("Database is up to date.")
            return

        print(f"Pending migration(s): {', '.join(pending)}")
        if args.status:
            return

        settings.data_dir.mkdir(parents=True, exist_ok=True)
        applied = migrator.run_migrations()
    except MigrationFailed as e:
        logger.error("%s", e.message)
        sys.exit(1)
    print(f"Applied {len(applied)} migration(s): {', '.join(applied)}")


def handle_create_admin(settings: Settings, args: argparse.Namespace) -> None:
    ctx = get_context(settings)
    role = args.role or ctx.rules.auth.admin_role
    try:
        result = run_create_user(
            CreateUserInput(
                login_id=args.login_id,
                full_name=args.full_name,
                password=args.password,
                pin=args.pin,
                role_tag=role,
                email=args.email,
            ),
            user_repo=ctx.user_repo,
            hasher=ctx.hasher,
            time=ctx.clock,
            min_password_length=ctx.rules.auth.min_password_length,
        )
    except AdminError as e:
        logger.error("Cannot create %s: %s", args.login_id, e.message)
        sys.exit(1)
    print(f"Created {result.user.login_id} with role '{result.user.role_tag}'.")


def handle_serve(settings: Settings, args: argparse.Namespace) -> None:
    import uvicorn

    uvicorn.run(
        "src.api.main:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        log_level=settings.log_level.lower(),
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Gusen admin console")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # migrate
    migrate_parser = subparsers.add_parser("migrate", help="Apply pending database migrations")
    migrate_parser.add_argument(
        "--status", action="store_true", help="List pending migrations without applying them"
    )

    # create-admin
    create_parser = subparsers.add_parser("create-admin", help="Create an administrator")
    create_parser.add_argument("login_id", help="Login ID (stored upper-cased)")
    create_parser.add_argument("--full-name", required=True)
    create_parser.add_argument("--password", required=True)
    create_parser.add_argument("--pin", required=True)
    create_parser.add_argument("--email")
    create_parser.add_argument("--role", help="Role tag (defaults to the admin role)")

    # serve
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    args = parser.parse_args(argv)

    settings = Settings()
    configure_logging(settings.log_level)

    if args.command == "migrate":
        handle_migrate(settings, args)
    elif args.command == "create-admin":
        handle_create_admin(settings, args)
    elif args.command == "serve":
        handle_serve(settings, args)


if __name__ == "__main__":
    main()
