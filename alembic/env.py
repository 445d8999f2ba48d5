import logging
import sys
from logging.config import fileConfig

from sqlalchemy import engine_from_config, pool

from alembic import context
from fleet_service.core.config import config as app_config
from fleet_service.core.database import Base

# this is the Alembic Config object
config = context.config

# Interpret the config file for Python logging
if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)
logger = logging.getLogger("alembic.env")

try:
    db_url = app_config.DATABASE_URL
    if not db_url:
        raise ValueError("DATABASE_URL is not set in application configuration")

    config.set_main_option("sqlalchemy.url", db_url)
    logger.info("Database URL configured successfully")

except AttributeError as e:
    logger.error("DATABASE_URL attribute not found in app configuration")
    logger.error(f"Error details: {str(e)}", exc_info=True)
    sys.exit(1)
except ValueError as e:
    logger.error(f"Configuration Error: {str(e)}")
    sys.exit(1)

# register the models on Base.metadata for 'autogenerate' support
from fleet_service.models import *  # noqa

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode.

    This configures the context with just a URL
    and not an Engine, though an Engine is acceptable
    here as well.  By skipping the Engine creation
    we don't even need a DBAPI to be available.

    Calls to context.execute() here emit the given string to the
    script output.

    """
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=url.startswith("sqlite"),
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode.

    In this scenario we need to create an Engine
    and associate a connection with the context.
    A connection handed over in ``config.attributes`` (tests) is used as is.

    """
    connection = config.attributes.get("connection")
    if connection is not None:
        do_run_migrations(connection)
        return

    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        do_run_migrations(connection)


def do_run_migrations(connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        render_as_batch=connection.dialect.name == "sqlite",
    )

    with context.begin_transaction():
        context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
