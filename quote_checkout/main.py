"""Quote Checkout — FastAPI application factory."""

import logging
import os
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from quote_checkout import __version__
from quote_checkout.core.config import Settings, get_settings
from quote_checkout.core.exceptions import register_exception_handlers
from quote_checkout.middleware.request_log import RequestLogMiddleware
from quote_checkout.routers.checkout import router as checkout_router
from quote_checkout.routers.system import router as system_router
from quote_checkout.services.checkout import CheckoutService
from quote_checkout.services.payments import PaymentGateway
from quote_checkout.services.sheets import SheetWriter, build_sheet_writer

logger = logging.getLogger(__name__)


def _configure_logging(settings: Settings) -> None:
    """Set up structured logging for the application."""
    level = logging.DEBUG if settings.app_env == "development" else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    # Quiet noisy libraries
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("stripe").setLevel(logging.WARNING)
    logging.getLogger("googleapiclient.discovery_cache").setLevel(logging.ERROR)


def create_app(
    settings: Settings | None = None,
    *,
    gateway: PaymentGateway | None = None,
    sheet_writer: SheetWriter | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    _configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        docs_url="/docs" if settings.app_env == "development" else None,
        redoc_url="/redoc" if settings.app_env == "development" else None,
    )

    # --- External clients, built once and shared by all requests ---
    gateway = gateway or PaymentGateway.from_settings(settings)
    sheet_writer = sheet_writer or build_sheet_writer(settings)
    app.state.settings = settings
    app.state.sheet_writer = sheet_writer
    app.state.checkout_service = CheckoutService(gateway, sheet_writer)

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    # --- Request logging ---
    app.add_middleware(RequestLogMiddleware)

    # --- Global exception handlers ---
    register_exception_handlers(app)

    # --- API routes ---
    app.include_router(system_router)
    app.include_router(checkout_router)

    # --- Quote form and post-payment pages (mounted last so API routes win) ---
    if os.path.isdir(settings.static_dir):
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
    else:
        logger.warning("Static directory %r not found; quote form pages are not served", settings.static_dir)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve ``app`` with uvicorn on ``$PORT``."""
    import uvicorn

    settings = app.state.settings
    logger.info("Server running on http://localhost:%d", settings.app_port)
    uvicorn.run(app, host="0.0.0.0", port=settings.app_port)
