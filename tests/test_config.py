import pytest

from upnotif.config import ConfigError, Settings, parse_interval, parse_urls, parse_webhook


@pytest.fixture
def env(monkeypatch):
    monkeypatch.setenv("UPNOTIF_URLS", "https://a.test, https://b.test")
    monkeypatch.setenv("UPNOTIF_SLACK_WEBHOOK", "https://hooks.slack.com/services/T000/B000/XXX")
    monkeypatch.delenv("UPNOTIF_INTERVAL_SECONDS", raising=False)
    return monkeypatch


def test_settings_from_environment(env):
    settings = Settings()
    assert settings.urls == ("https://a.test", "https://b.test")
    assert settings.slack_webhook == "https://hooks.slack.com/services/T000/B000/XXX"
    assert settings.interval_seconds == 60
    assert not settings.test_mode


def test_test_sentinel_enables_console_mode(env):
    env.setenv("UPNOTIF_SLACK_WEBHOOK", "test")
    assert Settings().test_mode


def test_interval_override(env):
    env.setenv("UPNOTIF_INTERVAL_SECONDS", "5")
    assert Settings().interval_seconds == 5


@pytest.mark.parametrize("missing", ["UPNOTIF_URLS", "UPNOTIF_SLACK_WEBHOOK"])
def test_missing_required_variable(env, missing):
    env.delenv(missing)
    with pytest.raises(ConfigError, match=f"{missing} environment variable is required"):
        Settings()


@pytest.mark.parametrize("raw", ["", "   ", " , ,"])
def test_empty_url_list_is_rejected(raw):
    with pytest.raises(ConfigError, match="At least one URL"):
        parse_urls(raw)


def test_url_segments_are_trimmed_and_order_preserved():
    assert parse_urls(" https://b.test ,,http://a.test/health ") == (
        "https://b.test",
        "http://a.test/health",
    )


@pytest.mark.parametrize("bad", ["not a url", "example.com", "ftp://files.test", "https://"])
def test_invalid_url_is_rejected(bad):
    with pytest.raises(ConfigError, match="Invalid URL"):
        parse_urls(f"https://ok.test,{bad}")


def test_invalid_webhook_is_rejected():
    with pytest.raises(ConfigError, match="Invalid Slack webhook URL"):
        parse_webhook("slack please")
    assert parse_webhook("test") == "test"


@pytest.mark.parametrize("raw", ["abc", "1.5", ""])
def test_non_numeric_interval(raw):
    with pytest.raises(ConfigError, match="must be a valid number"):
        parse_interval(raw)


@pytest.mark.parametrize("raw", ["0", "-10"])
def test_non_positive_interval(raw):
    with pytest.raises(ConfigError, match="must be a positive number"):
        parse_interval(raw)
