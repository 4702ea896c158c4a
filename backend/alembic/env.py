"""Alembic environment — runs Eureka migrations on the async engine.

The URL comes from DATABASE_URL (rewritten to the async driver the same way
Settings does), falling back to alembic.ini for docker-compose. Settings itself
is not loaded: migrations must not require JWT_SECRET.
"""

import asyncio
import os
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.ext.asyncio import async_engine_from_config

from alembic import context

import eureka.models  # noqa: F401  (registers every table on Base.metadata)
from eureka.config import to_async_database_url
from eureka.db.base import Base

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

config.set_main_option(
    "sqlalchemy.url",
    to_async_database_url(
        os.environ.get("DATABASE_URL") or config.get_main_option("sqlalchemy.url"),
    ),
)


def _configure(**kwargs) -> None:
    context.configure(
        target_metadata=Base.metadata,
        compare_type=True,
        # SQLite cannot ALTER most constraints in place
        render_as_batch=config.get_main_option("sqlalchemy.url").startswith("sqlite"),
        **kwargs,
    )


def run_offline() -> None:
    """Emit SQL to stdout instead of connecting."""
    _configure(
        url=config.get_main_option("sqlalchemy.url"),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def _run_sync(connection) -> None:
    _configure(connection=connection)
    with context.begin_transaction():
        context.run_migrations()


async def run_online() -> None:
    engine = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    async with engine.connect() as connection:
        await connection.run_sync(_run_sync)
    await engine.dispose()


if context.is_offline_mode():
    run_offline()
else:
    asyncio.run(run_online())
