from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = Field(default="Quote Checkout", alias="APP_NAME")
    app_env: str = Field(default="development", alias="APP_ENV")
    app_port: int = Field(default=4242, alias="PORT")
    cors_origins: list[str] = Field(
        default=[
            "https://ironhaus-insurance-1.onrender.com",
            "http://localhost:4242",
        ],
        alias="CORS_ORIGINS",
    )  # JSON list when set from the environment
    static_dir: str = Field(default="public", alias="STATIC_DIR")

    # Stripe
    stripe_secret_key: str | None = Field(default=None, alias="STRIPE_SECRET_KEY")
    stripe_publishable_key: str | None = Field(default=None, alias="STRIPE_PUBLISHABLE_KEY")
    stripe_timeout: float = Field(default=20.0, alias="STRIPE_TIMEOUT")
    checkout_product_name: str = Field(default="Auto Group Payment", alias="CHECKOUT_PRODUCT_NAME")
    checkout_success_url: str = Field(
        default="https://ironhaus-insurance-1.onrender.com/success.html",
        alias="CHECKOUT_SUCCESS_URL",
    )
    checkout_cancel_url: str = Field(
        default="https://ironhaus-insurance-1.onrender.com/cancel.html",
        alias="CHECKOUT_CANCEL_URL",
    )

    # Google Sheets (optional back-office log)
    google_sheet_id: str | None = Field(default=None, alias="GOOGLE_SHEET_ID")
    google_sheet_range: str = Field(
        default="Sheet1!A:H", alias="GOOGLE_SHEET_RANGE",
    )  # Name | Email | Address | Year | Make/Model | VIN | Amount | Policy Number
    google_sheets_timeout: float = Field(default=15.0, alias="GOOGLE_SHEETS_TIMEOUT")

    # Service account credential fields
    google_type: str | None = Field(default="service_account", alias="GOOGLE_TYPE")
    google_project_id: str | None = Field(default=None, alias="GOOGLE_PROJECT_ID")
    google_private_key_id: str | None = Field(default=None, alias="GOOGLE_PRIVATE_KEY_ID")
    google_private_key: str | None = Field(default=None, alias="GOOGLE_PRIVATE_KEY")
    google_client_email: str | None = Field(default=None, alias="GOOGLE_CLIENT_EMAIL")
    google_client_id: str | None = Field(default=None, alias="GOOGLE_CLIENT_ID")
    google_auth_uri: str | None = Field(
        default="https://accounts.google.com/o/oauth2/auth", alias="GOOGLE_AUTH_URI",
    )
    google_token_uri: str | None = Field(
        default="https://oauth2.googleapis.com/token", alias="GOOGLE_TOKEN_URI",
    )
    google_auth_provider_x509_cert_url: str | None = Field(
        default=None, alias="GOOGLE_AUTH_PROVIDER_X509_CERT_URL",
    )
    google_client_x509_cert_url: str | None = Field(
        default=None, alias="GOOGLE_CLIENT_X509_CERT_URL",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
        "extra": "ignore",
    }

    @field_validator("google_private_key")
    @classmethod
    def _unescape_private_key(cls, value: str | None) -> str | None:
        # Hosting dashboards store the PEM on one line with literal "\n" sequences.
        if value:
            return value.replace("\\n", "\n")
        return value

    @property
    def sheets_enabled(self) -> bool:
        """The sheet log is active only when the sheet id and the key pair are configured."""
        return bool(
            self.google_sheet_id
            and self.google_client_email
            and self.google_private_key
        )

    @property
    def service_account_info(self) -> dict[str, Any]:
        """Service-account JSON shape expected by ``google.oauth2.service_account``."""
        return {
            "type": self.google_type or "service_account",
            "project_id": self.google_project_id,
            "private_key_id": self.google_private_key_id,
            "private_key": self.google_private_key,
            "client_email": self.google_client_email,
            "client_id": self.google_client_id,
            "auth_uri": self.google_auth_uri,
            "token_uri": self.google_token_uri,
            "auth_provider_x509_cert_url": self.google_auth_provider_x509_cert_url,
            "client_x509_cert_url": self.google_client_x509_cert_url,
        }

    @property
    def env_presence(self) -> dict[str, bool]:
        """Which required secrets are set (never their values)."""
        return {
            "STRIPE_SECRET_KEY": bool(self.stripe_secret_key),
            "STRIPE_PUBLISHABLE_KEY": bool(self.stripe_publishable_key),
            "GOOGLE_SHEET_ID": bool(self.google_sheet_id),
            "GOOGLE_CLIENT_EMAIL": bool(self.google_client_email),
        }


def get_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings()
