import logging

import pytest

from swagclient import Config, HttpClient, setup_logging


class TestConfig:
    def test_defaults_to_empty_base_url(self):
        assert Config.from_env().base_url == ""

    def test_config_from_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SWAGCLIENT_BASE_URL", "https://example.com")

        assert Config.from_env().base_url == "https://example.com"

    def test_argument_wins_over_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SWAGCLIENT_BASE_URL", "https://example.com")

        assert Config.from_env("https://other.com").base_url == "https://other.com"


class TestClientConfig:
    def test_default_base_api_params(self):
        client = HttpClient(custom_fetch=lambda url, options: None)  # type: ignore[arg-type,return-value]

        params = client.base_api_params
        assert params.credentials == "same-origin"
        assert params.redirect == "follow"
        assert params.referrer_policy == "no-referrer"
        assert params.headers == {}

    def test_base_api_params_are_merged_over_defaults(self):
        client = HttpClient(
            base_api_params={"credentials": "include", "headers": {"X": "1"}},
            custom_fetch=lambda url, options: None,  # type: ignore[arg-type,return-value]
        )

        params = client.base_api_params
        assert params.credentials == "include"
        assert params.redirect == "follow"
        assert params.headers == {"X": "1"}

    def test_base_url_can_be_changed(self):
        client = HttpClient(
            base_url="https://a.example.com",
            custom_fetch=lambda url, options: None,  # type: ignore[arg-type,return-value]
        )

        client.base_url = "https://b.example.com"

        assert client.base_url == "https://b.example.com"

    def test_security_data_slot(self):
        client = HttpClient(custom_fetch=lambda url, options: None)  # type: ignore[arg-type,return-value]
        assert client.security_data is None

        client.set_security_data({"token": "abc"})

        assert client.security_data == {"token": "abc"}


class TestSetupLogging:
    def test_sets_level_without_stacking_handlers(self):
        logger = logging.getLogger("swagclient")
        before = len(logger.handlers)

        setup_logging(debug=True)
        setup_logging(debug=False)

        assert logger.level == logging.INFO
        assert len(logger.handlers) <= before + 1
