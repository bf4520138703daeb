# backend/supplier_api/core/db.py
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from supplier_api.core.errors import PersistenceError
from supplier_api.domain.constants import MSG_TX_COMMIT_FAILED, MSG_TX_START_FAILED

logger = logging.getLogger(__name__)

Base = declarative_base()


class Storage:
    """
    Uygulama başında bir kez kurulan engine + session fabrikası.
    Global değil; create_app içinde oluşturulup app.state'e konur.
    """

    def __init__(self, dsn: str, *, statement_timeout_ms: int = 0):
        url = make_url(dsn)
        engine_kwargs = dict(pool_pre_ping=True)

        # Dialect'e göre güvenli ayarlar
        backend = url.get_backend_name()  # örn: 'sqlite', 'postgresql'
        if backend.startswith("sqlite"):
            # SQLite'ta thread check'i kapat, pool boyutu argümanları verme
            engine_kwargs["connect_args"] = {"check_same_thread": False}
        elif backend.startswith("postgresql"):
            engine_kwargs.update(pool_size=5, max_overflow=10)
            if statement_timeout_ms > 0:
                # Takılan sorgu sunucu tarafında kesilsin
                engine_kwargs["connect_args"] = {"options": f"-c statement_timeout={int(statement_timeout_ms)}"}

        self.url = url
        self.engine = create_engine(url, **engine_kwargs)
        self.SessionLocal = sessionmaker(bind=self.engine, autoflush=False)

    @property
    def dialect(self) -> str:
        return self.engine.dialect.name

    def session(self) -> Session:
        return self.SessionLocal()

    def ping(self) -> None:
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.storage.session()
    try:
        yield db
    finally:
        db.close()


def _safe_rollback(db: Session) -> None:
    # Rollback hatası asıl hatanın üstüne yazılmasın
    try:
        db.rollback()
    except SQLAlchemyError:
        logger.exception("transaction rollback failed")


@contextmanager
def transaction_scope(db: Session) -> Iterator[Session]:
    """
    Tek transaction aç; blok hatasız biterse commit, aksi halde rollback.
    Sonuç ya commit ya rollback'tir, transaction açık kalmaz.
    """
    try:
        db.begin()
    except SQLAlchemyError as e:
        logger.exception("transaction begin failed")
        raise PersistenceError(MSG_TX_START_FAILED) from e

    try:
        yield db
    except BaseException:
        _safe_rollback(db)
        raise

    try:
        db.commit()
    except SQLAlchemyError as e:
        logger.exception("transaction commit failed")
        _safe_rollback(db)
        raise PersistenceError(MSG_TX_COMMIT_FAILED) from e
