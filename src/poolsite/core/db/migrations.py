"""Reusable migration runner for the CLI and application startup."""

import asyncio

from alembic.config import Config

from alembic import command


def run_migrations_sync(revision: str = "head") -> None:
    """Run Alembic migrations synchronously."""
    alembic_cfg = Config("alembic.ini")
    command.upgrade(alembic_cfg, revision)


async def run_migrations_async(revision: str = "head") -> None:
    """Run Alembic migrations from async context.

    Runs in a worker thread because Alembic's env.py drives its own engine.
    """
    await asyncio.to_thread(run_migrations_sync, revision)
