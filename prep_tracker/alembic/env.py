"""
Alembic migration environment for the tracker schema.
The database URL always comes from settings (DATABASE_URL / .env), never from alembic.ini.
"""
import sys
from pathlib import Path

# alembic/ is in prep_tracker/; the project root (prep_tracker/..) must be importable
sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from logging.config import fileConfig

from sqlalchemy import create_engine, pool
from alembic import context

from prep_tracker.app.core.config import settings
from prep_tracker.app.db.base import Base

# Register every table on Base.metadata for autogenerate
import prep_tracker.app.models  # noqa: F401

config = context.config
config.set_main_option("sqlalchemy.url", settings.database_url)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)


def _context_options(dialect_name: str) -> dict:
    # SQLite ALTERs run in batch mode (copy-and-move)
    return {
        "target_metadata": Base.metadata,
        "compare_type": True,
        "render_as_batch": dialect_name == "sqlite",
    }


def run_migrations_offline() -> None:
    """Emit SQL to stdout without connecting."""
    url = settings.database_url
    context.configure(
        url=url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_context_options(url.split(":", 1)[0].split("+", 1)[0]),
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run against a live connection; NullPool so the process exits cleanly."""
    connectable = create_engine(settings.database_url, poolclass=pool.NullPool)
    with connectable.connect() as connection:
        context.configure(connection=connection, **_context_options(connection.dialect.name))
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
