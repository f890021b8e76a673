"""Checkout schemas: the quote submission, the payment session, and the back-office sheet row."""

from pydantic import BaseModel, Field

from quote_checkout.schemas.common import CamelModel

# Request body keys, in the order missing ones are reported.
REQUIRED_TEXT_FIELDS: tuple[str, ...] = (
    "fullName",
    "makeModel",
    "carYear",
    "vinNumber",
    "address",
    "email",
)

MIN_AMOUNT_CENTS = 50


class QuoteSubmission(CamelModel):
    """A validated quote submission. ``amount`` is integer cents."""

    full_name: str
    make_model: str
    car_year: str
    vin_number: str
    address: str
    email: str
    amount: int = Field(ge=MIN_AMOUNT_CENTS)


class PaymentSession(BaseModel):
    """Hosted checkout session created by the payment processor; ``id`` is opaque."""

    id: str
    url: str | None = None


class CheckoutSessionResponse(BaseModel):
    id: str


class SideRecord(BaseModel):
    """One back-office sheet row.

    Column order: name, email, address, year, make/model, VIN, amount, policy number.
    """

    full_name: str
    email: str
    address: str
    car_year: str
    make_model: str
    vin_number: str
    amount_display: str
    policy_number: str

    def as_row(self) -> list[str]:
        return [
            self.full_name,
            self.email,
            self.address,
            self.car_year,
            self.make_model,
            self.vin_number,
            self.amount_display,
            self.policy_number,
        ]
