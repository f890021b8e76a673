"""Routers package — HTTP endpoint definitions.

Files:
  checkout.py  — POST /create-checkout-session
  system.py    — GET /health, GET /config, POST /test-sheets

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to quote_checkout/services/.
"""
