# backend/supplier_api/core/migrations.py
import logging
import os

from alembic import command
from alembic.config import Config

from supplier_api.core.db import Storage

logger = logging.getLogger(__name__)

# alembic.ini ve alembic/ klasörü backend kökünde
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
ALEMBIC_DIR = os.path.join(BACKEND_DIR, "alembic")


def alembic_config() -> Config:
    cfg = Config()
    cfg.set_main_option("script_location", ALEMBIC_DIR)
    return cfg


def run_migrations(storage: Storage, revision: str = "head") -> None:
    """Storage'ın engine'i üzerinden `alembic upgrade <revision>` çalıştırır."""
    cfg = alembic_config()
    with storage.engine.begin() as connection:
        # env.py bu bağlantıyı kullanır, yeni engine açmaz
        cfg.attributes["connection"] = connection
        command.upgrade(cfg, revision)
    logger.info("Database migration completed.")
