"""Pytest fixtures: isolated settings, fake Stripe gateway and fake sheet writer."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from quote_checkout.core.config import Settings
from quote_checkout.core.exceptions import GatewayError, SideRecordError
from quote_checkout.main import create_app
from tests.fakes import FakeGateway, FakeSheetWriter

PUBLIC_DIR = Path(__file__).resolve().parents[1] / "public"

_ENV_KEYS = (
    "STRIPE_SECRET_KEY",
    "STRIPE_PUBLISHABLE_KEY",
    "GOOGLE_SHEET_ID",
    "GOOGLE_CLIENT_EMAIL",
    "GOOGLE_PRIVATE_KEY",
    "CORS_ORIGINS",
    "PORT",
    "GOOGLE_SHEET_RANGE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        STRIPE_SECRET_KEY="sk_test_abc",
        STRIPE_PUBLISHABLE_KEY="pk_test_abc",
        APP_ENV="test",
        STATIC_DIR=str(PUBLIC_DIR),
    )


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def sheet_writer():
    return FakeSheetWriter()


@pytest.fixture
def client(settings, gateway, sheet_writer):
    app = create_app(settings, gateway=gateway, sheet_writer=sheet_writer)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def valid_payload():
    return {
        "fullName": "Jane Driver",
        "makeModel": "Honda Civic",
        "carYear": 2019,
        "vinNumber": "1HGCM82633A004352",
        "address": "123 Test St, Newark, NJ 07102",
        "amount": 7999,
        "email": "jane@example.com",
    }


@pytest.fixture
def failing_gateway():
    return FakeGateway(error=GatewayError("Your card was declined.", type="card_error", code="card_declined"))


@pytest.fixture
def failing_sheet_writer():
    return FakeSheetWriter(error=SideRecordError("Sheets API error 403: forbidden"))
