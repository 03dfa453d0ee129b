"""Tests for client configuration objects."""

from dataclasses import FrozenInstanceError, replace

import pytest

from dnsimple.config import API_BASE_URI, ClientConfig, HttpProxy


class TestClientConfig:
    def test_defaults(self):
        config = ClientConfig()

        assert config.base_uri == "https://api.dnsimple.com/v1"
        assert config.username is None
        assert config.http_proxy is None
        assert config.debug is False
        assert config.credentials_loaded is False

    def test_default_base_uri_constant_has_trailing_slash(self):
        assert API_BASE_URI.endswith("/")
        assert not ClientConfig().base_uri.endswith("/")

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("https://example.com/", "https://example.com"),
            ("https://example.com", "https://example.com"),
            ("https://example.com/v1/", "https://example.com/v1"),
        ],
    )
    def test_base_uri_is_normalized(self, value, expected):
        assert ClientConfig(base_uri=value).base_uri == expected

    def test_replace_normalizes_base_uri(self):
        config = replace(ClientConfig(), base_uri="https://example.com/")

        assert config.base_uri == "https://example.com"

    def test_is_immutable(self):
        config = ClientConfig()

        with pytest.raises(FrozenInstanceError):
            config.username = "someone"

    @pytest.mark.parametrize(
        "settings, expected",
        [
            ({}, False),
            ({"username": "u"}, False),
            ({"password": "p"}, False),
            ({"username": "u", "password": "p"}, True),
            ({"username": "u", "api_token": "t"}, True),
            ({"credentials_loaded": True}, True),
        ],
    )
    def test_has_credentials(self, settings, expected):
        assert ClientConfig(**settings).has_credentials is expected

    def test_repr_hides_secrets(self):
        text = repr(ClientConfig(username="u", password="hunter2", api_token="tok123"))

        assert "hunter2" not in text
        assert "tok123" not in text
        assert "username='u'" in text


class TestHttpProxy:
    @pytest.mark.parametrize(
        "proxy, expected",
        [
            (HttpProxy("proxy.local", 3128), "http://proxy.local:3128"),
            (HttpProxy("proxy.local", "8080"), "http://proxy.local:8080"),
            (HttpProxy("proxy.local"), "http://proxy.local"),
            (HttpProxy("https://secure.local", 443), "https://secure.local:443"),
            (HttpProxy(port=3128), "http://localhost:3128"),
        ],
    )
    def test_url(self, proxy, expected):
        assert proxy.url == expected

    def test_port_only_proxy_defaults_to_localhost(self):
        assert HttpProxy(addr=None, port=8080).url == "http://localhost:8080"
        assert HttpProxy().url == "http://localhost"
