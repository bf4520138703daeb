# backend/alembic/env.py
from logging.config import fileConfig
import os, sys
from alembic import context

# --- Proje kökünü PYTHONPATH'e ekle (.. = backend) ---
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if BASE_DIR not in sys.path:
    sys.path.insert(0, BASE_DIR)

from supplier_api.core.db import Base
# (Modeller import edilince metadata dolu olur)
from supplier_api import models  # noqa: F401

# Alembic config & logging
config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = Base.metadata


def _database_url() -> str:
    from supplier_api.core.config import Settings
    return Settings.from_env().database_url


def run_migrations_offline():
    """Run migrations in 'offline' mode."""
    url = _database_url()
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        compare_type=True,
        compare_server_default=False,
        render_as_batch=url.startswith("sqlite"),
    )
    with context.begin_transaction():
        context.run_migrations()


def _run_with_connection(connection):
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        compare_server_default=False,
        render_as_batch=(connection.dialect.name == "sqlite"),
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    """Run migrations in 'online' mode."""
    # Uygulama (run_migrations) kendi bağlantısını verir
    connection = config.attributes.get("connection")
    if connection is not None:
        _run_with_connection(connection)
        return

    from supplier_api.core.db import Storage
    storage = Storage(_database_url())
    try:
        with storage.engine.connect() as connection:
            _run_with_connection(connection)
    finally:
        storage.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
