"""Response models for the service endpoints (/health, /config, /test-sheets)."""

from pydantic import BaseModel

from quote_checkout.schemas.common import CamelModel


class HealthResponse(BaseModel):
    """Health-check response returned by /health. ``envs`` reports presence, never values."""
    ok: bool = True
    envs: dict[str, bool]


class PublicConfigResponse(CamelModel):
    publishable_key: str = ""


class SheetTestResponse(BaseModel):
    ok: bool
    error: str | None = None
