import pytest

from storefront.config import load_settings


def test_missing_secrets_fail_fast(monkeypatch):
    monkeypatch.delenv("JWT_SECRET", raising=False)
    monkeypatch.delenv("STRIPE_SECRET_KEY", raising=False)

    with pytest.raises(RuntimeError) as exc:
        load_settings()

    assert "STRIPE_SECRET_KEY" in str(exc.value)
    assert "JWT_SECRET" in str(exc.value)


def test_defaults(monkeypatch):
    for name in ("PORT", "JWT_EXPIRE_HOURS", "CURRENCY", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("FRONTEND_URL", "https://shop.example.com/")

    settings = load_settings()

    assert settings.port == 5000
    assert settings.jwt_expire_hours == 24
    assert settings.currency == "gbp"
    assert settings.cors_origins == ["*"]
    assert settings.frontend_url == "https://shop.example.com"


def test_bad_port(monkeypatch):
    monkeypatch.setenv("PORT", "eighty")

    with pytest.raises(RuntimeError):
        load_settings()
