"""Application factory wiring the exception-filter chain into FastAPI."""

from __future__ import annotations

from functools import partial

import uvicorn
from fastapi import FastAPI

from .chain import FilterChain
from .core.config import Settings, get_settings
from .core.logging import configure_logging
from .core.middleware import CorrelationIdMiddleware
from .registration import register_exception_filters
from .rendering import render_error


def create_app(settings: Settings | None = None) -> FastAPI:
    """Instantiate a FastAPI application with the default filter chain."""

    settings = settings or get_settings()
    configure_logging(settings)

    application = FastAPI(title=settings.project_name, version=settings.version)
    application.state.settings = settings

    application.add_middleware(CorrelationIdMiddleware, header_name=settings.request_id_header)

    renderer = partial(render_error, request_id_header=settings.request_id_header)
    register_exception_filters(application, FilterChain(renderer=renderer))

    return application


def run() -> None:
    """Convenience entry point for the ``exception-filters-demo`` script."""

    settings = get_settings()
    uvicorn.run(
        "exception_filters.main:create_app",
        factory=True,
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.reload,
        log_config=None,
    )
