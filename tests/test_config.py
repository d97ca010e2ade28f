"""Tests for config.py: credentials, fingerprint, YAML and env loading."""
import pytest

from unipay import config as config_module
from unipay.config import (
    API_BASE_LIVE,
    API_BASE_SANDBOX,
    PayPalSettings,
    _env,
    _load_paypal_settings,
    _load_yaml,
    get_config,
)
from unipay.errors import ConfigurationError

_ENV_NAMES = [
    "UNIPAY_PAYPAL_CLIENT_ID", "PAYPAL_CLIENT_ID",
    "UNIPAY_PAYPAL_CLIENT_SECRET", "PAYPAL_CLIENT_SECRET",
    "UNIPAY_PAYPAL_API_BASE", "PAYPAL_API_BASE",
    "UNIPAY_PAYPAL_ENV", "UNIPAY_LOG_FILE", "UNIPAY_TIMEOUT", "UNIPAY_REFRESH_THRESHOLD",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


# ── PayPalSettings ───────────────────────────────────────────────────

def test_defaults():
    settings = PayPalSettings()
    assert settings.api_base == API_BASE_SANDBOX
    assert settings.refresh_threshold == 60.0
    assert settings.acquire_on_first_use is True


def test_require_credentials_names_missing_fields():
    with pytest.raises(ConfigurationError, match="client_id, client_secret"):
        PayPalSettings().require_credentials()


def test_require_credentials_ok(fake_settings):
    fake_settings.require_credentials()


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        PayPalSettings(api_base="").require_credentials()


def test_fingerprint_deterministic(fake_settings):
    assert fake_settings.fingerprint() == fake_settings.model_copy().fingerprint()


def test_fingerprint_ignores_trailing_slash(fake_settings):
    slashed = fake_settings.model_copy(update={"api_base": fake_settings.api_base + "/"})
    assert slashed.fingerprint() == fake_settings.fingerprint()


def test_fingerprint_ignores_behavior_settings(fake_settings):
    tuned = fake_settings.model_copy(update={"timeout": 5.0, "log_file": "x.log"})
    assert tuned.fingerprint() == fake_settings.fingerprint()


def test_fingerprint_differs_by_secret(fake_settings):
    other = fake_settings.model_copy(update={"client_secret": "rotated"})
    assert other.fingerprint() != fake_settings.fingerprint()


# ── _env helper ──────────────────────────────────────────────────────

def test_env_first_key(monkeypatch):
    monkeypatch.setenv("FOO", "bar")
    assert _env("FOO", "BAZ") == "bar"


def test_env_fallback_key(monkeypatch):
    monkeypatch.delenv("FOO", raising=False)
    monkeypatch.setenv("BAZ", "qux")
    assert _env("FOO", "BAZ") == "qux"


def test_env_default(monkeypatch):
    monkeypatch.delenv("FOO", raising=False)
    monkeypatch.delenv("BAZ", raising=False)
    assert _env("FOO", "BAZ", default="fallback") == "fallback"


def test_env_strips_quotes(monkeypatch):
    monkeypatch.setenv("FOO", '"hello"')
    assert _env("FOO") == "hello"


# ── _load_paypal_settings ────────────────────────────────────────────

def test_load_from_env(clean_env):
    clean_env.setenv("PAYPAL_CLIENT_ID", "cid")
    clean_env.setenv("PAYPAL_CLIENT_SECRET", "csec")
    clean_env.setenv("UNIPAY_REFRESH_THRESHOLD", "120")

    settings = _load_paypal_settings({})

    assert settings.client_id == "cid"
    assert settings.client_secret == "csec"
    assert settings.refresh_threshold == 120.0


def test_prefixed_env_wins(clean_env):
    clean_env.setenv("UNIPAY_PAYPAL_CLIENT_ID", "prefixed")
    clean_env.setenv("PAYPAL_CLIENT_ID", "plain")
    assert _load_paypal_settings({}).client_id == "prefixed"


def test_env_overrides_file_values(clean_env):
    clean_env.setenv("PAYPAL_CLIENT_SECRET", "from-env")
    settings = _load_paypal_settings({"client_id": "from-file", "client_secret": "file-secret"})

    assert settings.client_id == "from-file"
    assert settings.client_secret == "from-env"


def test_live_environment(clean_env):
    clean_env.setenv("UNIPAY_PAYPAL_ENV", "LIVE")
    assert _load_paypal_settings({}).api_base == API_BASE_LIVE


def test_explicit_api_base_beats_live(clean_env):
    clean_env.setenv("UNIPAY_PAYPAL_ENV", "live")
    clean_env.setenv("PAYPAL_API_BASE", "https://api-m.sandbox.paypal.com")
    assert _load_paypal_settings({}).api_base == "https://api-m.sandbox.paypal.com"


# ── YAML and get_config ──────────────────────────────────────────────

def test_load_yaml_missing(tmp_path):
    assert _load_yaml(tmp_path) == {}


def test_load_yaml_not_mapping(tmp_path):
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "unipay.yaml").write_text("- just\n- a list\n")
    with pytest.raises(ConfigurationError, match="mapping"):
        _load_yaml(tmp_path)


def test_get_config_from_yaml(tmp_path, clean_env):
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "unipay.yaml").write_text(
        "paypal:\n"
        "  client_id: yaml-id\n"
        "  client_secret: yaml-secret\n"
        "  timeout: 10\n"
    )
    clean_env.setattr(config_module, "_find_project_root", lambda: tmp_path)
    get_config.cache_clear()
    try:
        config = get_config()
    finally:
        get_config.cache_clear()

    assert config.paypal.client_id == "yaml-id"
    assert config.paypal.client_secret == "yaml-secret"
    assert config.paypal.timeout == 10.0
    assert config.paypal.api_base == API_BASE_SANDBOX
