"""
Management commands.

Run with:
    python -m src.poolsite.cli migrate                     # alembic upgrade head
    python -m src.poolsite.cli create-admin --email a@b.c --name Admin
    python -m src.poolsite.cli serve --port 8000          # uvicorn, no reload
"""

import argparse
import asyncio
import getpass
import sys

import uvicorn

from src.poolsite.core.config import get_settings
from src.poolsite.core.db import dispose_engine, get_session, run_migrations_sync
from src.poolsite.core.logging import get_logger, setup_logging
from src.poolsite.models import UserRole
from src.poolsite.repositories import UserRepository
from src.poolsite.schemas.user import UserCreate
from src.poolsite.services import UserService

logger = get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Pool site CMS management")
    commands = parser.add_subparsers(dest="command", required=True)

    migrate = commands.add_parser("migrate", help="Apply database migrations")
    migrate.add_argument("--revision", default="head")

    create_admin = commands.add_parser("create-admin", help="Create a back-office user")
    create_admin.add_argument("--email", required=True)
    create_admin.add_argument("--name", required=True)
    create_admin.add_argument(
        "--password",
        help="Prompted for when omitted, so it stays out of shell history",
    )
    create_admin.add_argument(
        "--role",
        choices=[role.value for role in UserRole],
        default=UserRole.ADMIN.value,
    )

    serve = commands.add_parser("serve", help="Run the API server")
    serve.add_argument("--host", default="0.0.0.0")
    serve.add_argument("--port", type=int, default=8000)

    return parser.parse_args(argv)


async def create_user(email: str, name: str, password: str, role: str) -> int:
    """Create a user; returns a process exit code."""
    data = UserCreate(email=email, name=name, password=password, role=UserRole(role))
    try:
        async with get_session() as session:
            service = UserService(UserRepository(session), session)
            try:
                user = await service.create(data)
            except ValueError as e:
                logger.error("User not created", email=email, reason=str(e))
                return 1
    finally:
        await dispose_engine()

    logger.info("User created", user_id=str(user.id), role=user.role)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    setup_logging(settings.debug)

    if args.command == "migrate":
        run_migrations_sync(args.revision)
        logger.info("Migrations applied", revision=args.revision)
        return 0

    if args.command == "create-admin":
        password = args.password or getpass.getpass("Password: ")
        return asyncio.run(create_user(args.email, args.name, password, args.role))

    uvicorn.run(
        "src.poolsite.main:app",
        host=args.host,
        port=args.port,
        log_level="debug" if settings.debug else "info",
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
