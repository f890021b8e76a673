"""Operational endpoints: health, public client config, and a sheet smoke test."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from quote_checkout.core.config import Settings
from quote_checkout.core.dependencies import get_settings, get_sheet_writer
from quote_checkout.core.exceptions import SideRecordError
from quote_checkout.schemas.system import HealthResponse, PublicConfigResponse, SheetTestResponse
from quote_checkout.services.sheets import SheetWriter

logger = logging.getLogger(__name__)

router = APIRouter(tags=["System"])

TEST_ROW: list[str] = [
    "TEST ROW",
    "test@example.com",
    "123 Test St, NJ 07102",
    "2025",
    "Test Car",
    "TESTVIN1234567890",
    "$99.00/mo",
    "IH-TEST-US-ABCDE",
]


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)):
    return HealthResponse(ok=True, envs=settings.env_presence)


@router.get("/config", response_model=PublicConfigResponse)
async def public_config(settings: Settings = Depends(get_settings)):
    """Publishable key for Stripe.js on the quote form."""
    return PublicConfigResponse(publishable_key=settings.stripe_publishable_key or "")


@router.post("/test-sheets", response_model=SheetTestResponse, response_model_exclude_none=True)
async def test_sheets(writer: SheetWriter = Depends(get_sheet_writer)):
    """Append a fixed test row synchronously and report the outcome."""
    try:
        await writer.append_row(TEST_ROW)
    except SideRecordError as exc:
        logger.error("/test-sheets failed: %s", exc)
        return JSONResponse(status_code=500, content={"ok": False, "error": str(exc)})
    return SheetTestResponse(ok=True)
