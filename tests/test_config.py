import logging

from lingocards.config import Settings
from lingocards.main import configure_logging


def test_webhook_url_prefers_nested_setting() -> None:
    settings = Settings(webhook={"url": "http://new"}, n8n_webhook_url="http://legacy")
    assert settings.webhook_url == "http://new"


def test_legacy_webhook_variable(monkeypatch) -> None:
    monkeypatch.setenv("N8N_WEBHOOK_URL", "http://legacy")
    assert Settings().webhook_url == "http://legacy"


def test_nested_webhook_variables(monkeypatch) -> None:
    monkeypatch.setenv("WEBHOOK__URL", "http://hook")
    monkeypatch.setenv("WEBHOOK__TIMEOUT_SECONDS", "5")
    settings = Settings()
    assert settings.webhook_url == "http://hook"
    assert settings.webhook.timeout_seconds == 5.0


def test_no_webhook_by_default(monkeypatch) -> None:
    monkeypatch.delenv("N8N_WEBHOOK_URL", raising=False)
    monkeypatch.delenv("WEBHOOK__URL", raising=False)
    assert Settings().webhook_url is None


def test_log_level_setting_configures_root_logger(monkeypatch) -> None:
    root = logging.getLogger()
    previous = root.level
    monkeypatch.setenv("LOG_LEVEL", "debug")
    try:
        configure_logging(Settings())
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(previous)


def test_debug_setting(monkeypatch) -> None:
    monkeypatch.setenv("DEBUG", "true")
    assert Settings().debug is True
    assert Settings(debug=False).debug is False
