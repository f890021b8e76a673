"""Checkout endpoint — thin HTTP layer.

Business logic lives in :mod:`quote_checkout.services.checkout`. Validation and
gateway errors are ``AppException`` subclasses rendered by the global handlers
(400 / 500 with their own JSON bodies).
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Request

from quote_checkout.core.dependencies import get_checkout_service
from quote_checkout.schemas.checkout import CheckoutSessionResponse
from quote_checkout.services.checkout import CheckoutService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Checkout"])


async def _read_json_object(request: Request) -> dict:
    """Request body as a dict; anything that is not a JSON object reads as ``{}``."""
    try:
        body = await request.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


@router.post("/create-checkout-session", response_model=CheckoutSessionResponse)
async def create_checkout_session(
    request: Request,
    background_tasks: BackgroundTasks,
    service: CheckoutService = Depends(get_checkout_service),
):
    """Validate a quote, open a Stripe Checkout session, and return its id.

    The sheet append is scheduled after the response so it never delays the
    redirect to payment.
    """
    payload = await _read_json_object(request)
    result = await service.create_checkout_session(payload)

    background_tasks.add_task(service.record_submission, result.quote)
    return CheckoutSessionResponse(id=result.session.id)
