"""Application factory for the Astro API."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.base import BaseHTTPMiddleware

from astro import __version__
from astro.core.config import Settings, get_settings
from astro.core.errors import AstroError, StorageError
from astro.core.rate_limiter import RateLimiter
from astro.core.tokens import TokenService
from astro.db.session import Database
from astro.repositories import AccountRepository, CatalogRepository, MeaningRepository, ReadingRepository
from astro.routers import astrology as astrology_router
from astro.routers import auth as auth_router
from astro.routers import dashboard as dashboard_router
from astro.routers import numerology as numerology_router
from astro.services.auth_service import AuthService
from astro.services.catalog_service import CatalogService
from astro.services.dashboard_service import DashboardService
from astro.services.meaning_service import MeaningService
from astro.services.reading_service import ReadingService

logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers for a JSON API."""

    # Swagger UI and ReDoc load their own scripts and styles.
    docs_paths = ("/docs", "/redoc", "/openapi.json")

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        if not request.url.path.startswith(self.docs_paths):
            response.headers.setdefault("Content-Security-Policy", "default-src 'none'; frame-ancestors 'none'")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


def _wire_services(app: FastAPI, settings: Settings, database: Database) -> None:
    accounts = AccountRepository(database)
    readings = ReadingRepository(database)
    catalog = CatalogRepository(database)
    meaning_repo = MeaningRepository(database)
    tokens = TokenService(
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        ttl_seconds=settings.access_token_ttl_seconds,
    )
    meanings = MeaningService(meaning_repo, catalog)

    app.state.settings = settings
    app.state.database = database
    app.state.rate_limiter = RateLimiter(
        enabled=settings.rate_limit_enabled,
        trust_proxy_headers=settings.trust_proxy_headers,
    )
    app.state.auth_service = AuthService(accounts=accounts, tokens=tokens, settings=settings)
    app.state.meaning_service = meanings
    app.state.reading_service = ReadingService(readings, accounts, meanings)
    app.state.catalog_service = CatalogService(catalog)
    app.state.dashboard_service = DashboardService(accounts, readings)


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AstroError)
    async def astro_error_handler(request: Request, exc: AstroError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        fields = [".".join(str(part) for part in error.get("loc", ()) if part != "body") for error in exc.errors()]
        return JSONResponse(status_code=400, content={"error": "Invalid request.", "fields": fields})

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content=StorageError("Database error.").to_dict())


def create_app(settings: Optional[Settings] = None, *, database: Optional[Database] = None) -> FastAPI:
    """Build an application bound to ``settings`` (read from the environment by default)."""
    settings = (settings or get_settings()).validate()
    database = database or Database(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Astro API starting (env=%s)", settings.app_env)
        yield
        database.dispose()
        logger.info("Astro API stopped")

    app = FastAPI(title="Astro API", version=__version__, lifespan=lifespan)
    _wire_services(app, settings, database)
    _register_error_handlers(app)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.cors_origins),
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )
    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.is_production)

    @app.get("/health", tags=["health"])
    def health():
        return {"status": "ok", "version": __version__}

    app.include_router(auth_router.router)
    app.include_router(astrology_router.router)
    app.include_router(numerology_router.router)
    app.include_router(dashboard_router.router)
    return app
