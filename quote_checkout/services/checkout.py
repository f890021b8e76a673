"""Checkout service: validate a quote submission and open its payment session, then log it.

Order of work for one submission:

  1. validate the body (every missing field reported at once, then the amount)
  2. create the Stripe Checkout session (failure ends the request, nothing is logged to the sheet)
  3. the router answers the caller with the session id
  4. :meth:`CheckoutService.record_submission` runs afterwards as a background task;
     its outcome only ever reaches the logs

Rule: No FastAPI here. Pure Python business logic.
"""

import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping

from quote_checkout.core.exceptions import InvalidAmountError, MissingFieldsError
from quote_checkout.schemas.checkout import (
    MIN_AMOUNT_CENTS,
    REQUIRED_TEXT_FIELDS,
    PaymentSession,
    QuoteSubmission,
    SideRecord,
)
from quote_checkout.services.address import extract_region
from quote_checkout.services.payments import PaymentGateway
from quote_checkout.services.policy_number import format_monthly_amount, generate_policy_id
from quote_checkout.services.sheets import SheetWriter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckoutResult:
    quote: QuoteSubmission
    session: PaymentSession


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

def find_missing_fields(payload: Mapping[str, Any]) -> list[str]:
    """Names of required fields that are absent or empty, in form order."""
    return [name for name in REQUIRED_TEXT_FIELDS if not payload.get(name)]


def _to_finite_number(raw: Any) -> float | None:
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
    if not isinstance(raw, (int, float, str)) or raw == "":
        return None
    try:
        value = float(raw)
    except (ValueError, OverflowError):
        return None
    return value if math.isfinite(value) else None


def _json_safe(raw: Any) -> Any:
    if isinstance(raw, float) and not math.isfinite(raw):
        return str(raw)
    return raw


def parse_amount(raw: Any) -> int:
    """Coerce the submitted amount to integer cents (half-up rounding), minimum 50."""
    value = _to_finite_number(raw)
    if value is None:
        raise InvalidAmountError("invalid_amount_type", got=_json_safe(raw))

    cents = math.floor(value + 0.5)
    if cents < MIN_AMOUNT_CENTS:
        raise InvalidAmountError("invalid_amount_min_50", got=cents)
    return cents


def validate_submission(payload: Mapping[str, Any]) -> QuoteSubmission:
    """Turn a raw request body into a :class:`QuoteSubmission` or raise a ``ValidationError``."""
    missing = find_missing_fields(payload)
    if missing:
        raise MissingFieldsError(missing)

    amount = parse_amount(payload.get("amount"))

    return QuoteSubmission(
        full_name=str(payload["fullName"]),
        make_model=str(payload["makeModel"]),
        car_year=str(payload["carYear"]),
        vin_number=str(payload["vinNumber"]),
        address=str(payload["address"]),
        email=str(payload["email"]),
        amount=amount,
    )


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------

class CheckoutService:
    def __init__(self, gateway: PaymentGateway, sheet_writer: SheetWriter):
        self._gateway = gateway
        self._sheet_writer = sheet_writer

    async def create_checkout_session(self, payload: Mapping[str, Any]) -> CheckoutResult:
        """Validate and open a payment session. Raises ``ValidationError`` or ``GatewayError``."""
        quote = validate_submission(payload)
        session = await self._gateway.create_session(quote)
        return CheckoutResult(quote=quote, session=session)

    @staticmethod
    def build_side_record(quote: QuoteSubmission, *, today: date | None = None) -> SideRecord:
        region = extract_region(quote.address)
        return SideRecord(
            full_name=quote.full_name,
            email=quote.email,
            address=quote.address,
            car_year=quote.car_year,
            make_model=quote.make_model,
            vin_number=quote.vin_number,
            amount_display=format_monthly_amount(quote.amount),
            policy_number=generate_policy_id(region, today=today),
        )

    async def record_submission(self, quote: QuoteSubmission) -> None:
        """Append the quote to the back-office sheet. Runs detached; logs and swallows every failure."""
        try:
            record = self.build_side_record(quote)
            await self._sheet_writer.append_row(record.as_row())
        except Exception:
            logger.exception("Sheet append failed for %s", quote.email)
            return

        if self._sheet_writer.enabled:
            logger.info("Sheet append ok policy=%s", record.policy_number)
