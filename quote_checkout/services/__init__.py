"""Services package — all business logic lives here, never in routers.

Files:
  address.py        — state abbreviation from a free-text address
  policy_number.py  — IH-YYYYMMDD-ST-XXXXX policy numbers and "$X.XX/mo" amounts
  payments.py       — Stripe Checkout session gateway
  sheets.py         — Google Sheets back-office row writer (enabled / disabled variants)
  checkout.py       — submission pipeline: validate → pay → respond → log to sheet

Rule: routers call services, services call the external clients.
      No FastAPI imports in services.
"""
