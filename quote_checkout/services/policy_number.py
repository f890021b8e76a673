"""Human-readable policy numbers and display amounts for the back-office sheet."""

import random
import string
from datetime import date
from decimal import Decimal

from quote_checkout.services.address import DEFAULT_REGION

POLICY_PREFIX = "IH"
SUFFIX_LENGTH = 5
_BASE36_ALPHABET = string.digits + string.ascii_uppercase


def generate_policy_id(region_code: str | None = DEFAULT_REGION, *, today: date | None = None) -> str:
    """``IH-YYYYMMDD-REGION-XXXXX`` using the local date and a random base-36 suffix.

    Not unique by construction; the suffix only makes collisions unlikely.
    """
    day = today or date.today()
    region = (region_code or DEFAULT_REGION).upper()
    suffix = "".join(random.choices(_BASE36_ALPHABET, k=SUFFIX_LENGTH))
    return f"{POLICY_PREFIX}-{day:%Y%m%d}-{region}-{suffix}"


def format_monthly_amount(amount_cents: int) -> str:
    """7999 -> ``"$79.99/mo"``."""
    dollars = Decimal(int(amount_cents)) / Decimal(100)
    return f"${dollars:.2f}/mo"
