# backend/supplier_api/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from supplier_api.core.api import UTF8JSONResponse, fail, ok
from supplier_api.core.config import Settings
from supplier_api.core.db import Storage
from supplier_api.core.errors import InputError, ServiceError
from supplier_api.core.migrations import run_migrations
from supplier_api.domain.constants import MSG_DB_UNREACHABLE, MSG_INVALID_BODY
from supplier_api.routers.suppliers import router as suppliers_router

SERVICE_NAME = "SUPPLIER API"

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    storage = Storage(settings.database_url, statement_timeout_ms=settings.statement_timeout_ms)
    # Migration ya da bağlantı hatası -> süreç ayağa kalkmaz
    try:
        if settings.run_migrations:
            run_migrations(storage)
        storage.ping()
    except Exception:
        logger.exception("startup failed (%s)", storage.url.render_as_string(hide_password=True))
        storage.dispose()
        raise
    logger.info("Successfully connected to database.")

    app.state.storage = storage
    try:
        yield
    finally:
        storage.dispose()


# -----------------------------
# Global hata zarfı
# -----------------------------
async def http_exception_to_envelope(request: Request, exc: StarletteHTTPException):
    return fail(str(exc.detail) if exc.detail else exc.__class__.__name__, status_code=exc.status_code)


async def validation_exception_to_envelope(request: Request, exc: RequestValidationError):
    logger.warning("invalid request on %s %s: %s", request.method, request.url.path, exc.errors())
    return await service_error_to_envelope(request, InputError(MSG_INVALID_BODY))


async def service_error_to_envelope(request: Request, exc: ServiceError):
    return fail(exc.message, status_code=exc.status_code)


async def unhandled_to_envelope(request: Request, exc: Exception):
    logger.error("unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
    return fail("Internal server error", status_code=500)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    app = FastAPI(title=SERVICE_NAME, default_response_class=UTF8JSONResponse, lifespan=lifespan)
    app.state.settings = settings

    app.add_exception_handler(StarletteHTTPException, http_exception_to_envelope)
    app.add_exception_handler(RequestValidationError, validation_exception_to_envelope)
    app.add_exception_handler(ServiceError, service_error_to_envelope)
    app.add_exception_handler(Exception, unhandled_to_envelope)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---- Sağlık uçları ----
    @app.get("/health")
    def health():
        return ok({"service": SERVICE_NAME})

    @app.get("/db-ping")
    def db_ping(request: Request):
        try:
            request.app.state.storage.ping()
        except SQLAlchemyError:
            logger.exception("db-ping failed")
            return fail(MSG_DB_UNREACHABLE, status_code=500)
        return ok({"db": "ok"})

    app.include_router(suppliers_router)
    return app


app = create_app()
