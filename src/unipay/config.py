"""Configuration management for unipay.

Loads credentials from .env, an optional config/unipay.yaml, and the environment.
"""

from __future__ import annotations

import hashlib
import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from unipay.errors import ConfigurationError


API_BASE_SANDBOX = "https://api.sandbox.paypal.com"
API_BASE_LIVE = "https://api.paypal.com"


class PayPalSettings(BaseModel):
    """Credentials and client behavior for one PayPal REST account."""
    client_id: str = Field(default="", description="PayPal REST client ID")
    client_secret: str = Field(default="", description="PayPal REST client secret")
    api_base: str = Field(default=API_BASE_SANDBOX, description="API base URL (sandbox or live)")
    log_file: str | None = Field(default=None, description="Append request/response dumps to this file")
    timeout: float = Field(default=30.0, description="HTTP timeout in seconds for owned clients")
    refresh_threshold: float = Field(default=60.0, description="Refresh tokens expiring within this many seconds")
    acquire_on_first_use: bool = Field(default=True, description="Fetch a token on the first authenticated call")

    def require_credentials(self) -> None:
        """Raise ConfigurationError unless client ID, secret and API base are all set."""
        missing = [
            name for name in ("client_id", "client_secret", "api_base")
            if not getattr(self, name)
        ]
        if missing:
            raise ConfigurationError(
                f"PayPal {', '.join(missing)} required to create a client. "
                "Check your .env file or config/unipay.yaml."
            )

    def fingerprint(self) -> str:
        """Deterministic key for the credential set (used by the session registry)."""
        raw = json.dumps(
            {
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "api_base": self.api_base.rstrip("/"),
            },
            sort_keys=True,
        )
        return hashlib.sha256(raw.encode()).hexdigest()


class Config(BaseModel):
    """Full application configuration."""
    paypal: PayPalSettings = Field(default_factory=PayPalSettings)


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (where config/ or .env lives)."""
    current = Path(__file__).resolve().parent
    for parent in [current, *current.parents]:
        if (parent / "config" / "unipay.yaml").exists() or (parent / ".env").exists():
            return parent
    # Fallback: cwd
    return Path.cwd()


def _load_yaml(project_root: Path) -> dict[str, Any]:
    """Load the optional config/unipay.yaml file."""
    path = project_root / "config" / "unipay.yaml"
    if not path.exists():
        return {}

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected a mapping at the top of {path}")
    return data


def _env(*keys: str, default: str = "") -> str:
    """Try multiple env var names, return the first one found."""
    for key in keys:
        val = os.environ.get(key, "")
        if val:
            return val.strip().strip('"')
    return default


def _load_paypal_settings(file_values: dict[str, Any]) -> PayPalSettings:
    """Merge YAML values with environment overrides.

    Supports both UNIPAY_PAYPAL_* and plain PAYPAL_* names.
    """
    values = dict(file_values)
    overrides = {
        "client_id": _env("UNIPAY_PAYPAL_CLIENT_ID", "PAYPAL_CLIENT_ID"),
        "client_secret": _env("UNIPAY_PAYPAL_CLIENT_SECRET", "PAYPAL_CLIENT_SECRET"),
        "api_base": _env("UNIPAY_PAYPAL_API_BASE", "PAYPAL_API_BASE"),
        "log_file": _env("UNIPAY_LOG_FILE"),
        "timeout": _env("UNIPAY_TIMEOUT"),
        "refresh_threshold": _env("UNIPAY_REFRESH_THRESHOLD"),
    }
    values.update({k: v for k, v in overrides.items() if v})

    if _env("UNIPAY_PAYPAL_ENV").lower() == "live" and not overrides["api_base"]:
        values["api_base"] = API_BASE_LIVE

    return PayPalSettings(**values)


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Load and cache the full application configuration."""
    project_root = _find_project_root()

    # Load .env from project root if it exists
    env_path = project_root / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    data = _load_yaml(project_root)
    paypal = _load_paypal_settings(data.get("paypal") or {})

    return Config(paypal=paypal)
