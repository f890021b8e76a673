"""FastAPI dependencies: hand out the components built once in ``create_app``."""

from fastapi import Request

from quote_checkout.core.config import Settings
from quote_checkout.services.checkout import CheckoutService
from quote_checkout.services.sheets import SheetWriter


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_checkout_service(request: Request) -> CheckoutService:
    return request.app.state.checkout_service


def get_sheet_writer(request: Request) -> SheetWriter:
    return request.app.state.sheet_writer
