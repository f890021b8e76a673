"""Stripe Checkout gateway: turns a validated quote into a hosted payment session.

One ``StripeClient`` is created at start-up and shared by every request. The
module-level ``stripe.api_key`` is never set.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import stripe

from quote_checkout.core.config import Settings
from quote_checkout.core.exceptions import GatewayError
from quote_checkout.schemas.checkout import PaymentSession, QuoteSubmission

logger = logging.getLogger(__name__)

CURRENCY = "usd"


def _compact(values: Dict[str, Any]) -> Dict[str, str]:
    """Stripe metadata: strings only, empty entries dropped."""
    return {key: str(value) for key, value in values.items() if value not in (None, "")}


def build_session_params(
    quote: QuoteSubmission,
    *,
    product_name: str,
    success_url: str,
    cancel_url: str,
) -> Dict[str, Any]:
    """Checkout Session create params for one quote: a single USD line item at the quoted amount."""
    product_metadata = _compact(
        {
            "fullName": quote.full_name,
            "carYear": quote.car_year,
            "makeModel": quote.make_model,
            "vinNumber": quote.vin_number,
        }
    )
    params: Dict[str, Any] = {
        "mode": "payment",
        "payment_method_types": ["card"],
        "line_items": [
            {
                "price_data": {
                    "currency": CURRENCY,
                    "product_data": {"name": product_name, "metadata": product_metadata},
                    "unit_amount": quote.amount,
                },
                "quantity": 1,
            }
        ],
        "success_url": success_url,
        "cancel_url": cancel_url,
        "metadata": _compact(
            {
                "fullName": quote.full_name,
                "email": quote.email,
                "carYear": quote.car_year,
                "makeModel": quote.make_model,
                "vinNumber": quote.vin_number,
                "address": quote.address,
            }
        ),
    }
    if quote.email:
        params["customer_email"] = quote.email
    return params


def _gateway_error_from_stripe(exc: stripe.StripeError) -> GatewayError:
    error_object = getattr(exc, "error", None)
    return GatewayError(
        exc.user_message or str(exc) or exc.__class__.__name__,
        type=getattr(error_object, "type", None) or type(exc).__name__,
        code=exc.code,
        param=getattr(exc, "param", None) or getattr(error_object, "param", None),
        http_status=exc.http_status,
    )


class PaymentGateway:
    """Thin async wrapper around Stripe Checkout session creation."""

    def __init__(
        self,
        client: Optional[stripe.StripeClient],
        *,
        product_name: str,
        success_url: str,
        cancel_url: str,
    ) -> None:
        self._client = client
        self.product_name = product_name
        self.success_url = success_url
        self.cancel_url = cancel_url

    @classmethod
    def from_settings(cls, settings: Settings) -> "PaymentGateway":
        client: Optional[stripe.StripeClient] = None
        if settings.stripe_secret_key:
            client = stripe.StripeClient(
                settings.stripe_secret_key,
                http_client=stripe.HTTPXClient(timeout=settings.stripe_timeout),
                max_network_retries=0,
            )
        else:
            logger.warning("STRIPE_SECRET_KEY is missing; checkout sessions will fail")
        return cls(
            client,
            product_name=settings.checkout_product_name,
            success_url=settings.checkout_success_url,
            cancel_url=settings.checkout_cancel_url,
        )

    @property
    def configured(self) -> bool:
        return self._client is not None

    async def create_session(self, quote: QuoteSubmission) -> PaymentSession:
        """Create one hosted Checkout Session. Any processor failure raises ``GatewayError``; no retry."""
        if self._client is None:
            raise GatewayError(
                "Payment processor is not configured. Set STRIPE_SECRET_KEY.",
                type="configuration_error",
            )

        params = build_session_params(
            quote,
            product_name=self.product_name,
            success_url=self.success_url,
            cancel_url=self.cancel_url,
        )
        try:
            logger.info("Creating checkout session amount=%d", quote.amount)
            session = await self._client.checkout.sessions.create_async(params=params)
        except stripe.StripeError as exc:
            error = _gateway_error_from_stripe(exc)
            logger.error("Checkout session creation failed: %s", error.diagnostics())
            raise error from exc

        logger.info("Checkout session created id=%s", session.id)
        return PaymentSession(id=session.id, url=getattr(session, "url", None))
