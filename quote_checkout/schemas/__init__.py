"""Pydantic schemas package.

Folder intent:
  common.py    — CamelModel base shared by all API schemas
  checkout.py  — Quote submission, payment session and back-office row models
  system.py    — /health and /config response models
"""
