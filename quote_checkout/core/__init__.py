"""Core plumbing: settings, exceptions, and FastAPI dependencies."""
