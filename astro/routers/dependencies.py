"""Accessors for the services attached to the running application."""
from __future__ import annotations

from fastapi import Request

from astro.core.config import Settings
from astro.services.auth_service import AuthService
from astro.services.catalog_service import CatalogService
from astro.services.dashboard_service import DashboardService
from astro.services.meaning_service import MeaningService
from astro.services.reading_service import ReadingService


def get_settings_dep(request: Request) -> Settings:
    return request.app.state.settings


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def get_reading_service(request: Request) -> ReadingService:
    return request.app.state.reading_service


def get_meaning_service(request: Request) -> MeaningService:
    return request.app.state.meaning_service


def get_catalog_service(request: Request) -> CatalogService:
    return request.app.state.catalog_service


def get_dashboard_service(request: Request) -> DashboardService:
    return request.app.state.dashboard_service
