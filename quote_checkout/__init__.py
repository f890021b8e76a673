"""Quote checkout service: Stripe Checkout sessions for insurance quotes with a Google Sheets back-office log."""

__version__ = "1.0.0"
