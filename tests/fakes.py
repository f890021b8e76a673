"""In-memory stand-ins for the Stripe gateway, the Stripe client and the sheet writer."""

from types import SimpleNamespace

from quote_checkout.schemas.checkout import PaymentSession


class FakeGateway:
    """Records quotes; returns a fixed session or raises ``error``."""

    def __init__(self, session_id: str = "cs_test_123", error: Exception | None = None):
        self.session_id = session_id
        self.error = error
        self.quotes = []

    async def create_session(self, quote):
        self.quotes.append(quote)
        if self.error is not None:
            raise self.error
        return PaymentSession(id=self.session_id)


class FakeSheetWriter:
    enabled = True

    def __init__(self, error: Exception | None = None):
        self.error = error
        self.rows = []

    async def append_row(self, row):
        self.rows.append(list(row))
        if self.error is not None:
            raise self.error


def fake_stripe_client(session_id: str = "cs_test_abc", error: Exception | None = None):
    """Stand-in for ``stripe.StripeClient`` exposing ``checkout.sessions.create_async``."""
    calls = []

    async def create_async(params=None, options=None):
        calls.append(params)
        if error is not None:
            raise error
        return SimpleNamespace(id=session_id, url=f"https://checkout.stripe.com/c/pay/{session_id}")

    client = SimpleNamespace(checkout=SimpleNamespace(sessions=SimpleNamespace(create_async=create_async)))
    return client, calls
