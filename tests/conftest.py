"""Pytest configuration and shared fixtures for dnsimple tests."""

import httpx
import pytest
import yaml

from dnsimple import Client
from dnsimple.auth import CredentialResolver
from dnsimple.testing import RecordingHandler


@pytest.fixture(autouse=True)
def clear_env(monkeypatch, tmp_path):
    """Auto-cleanup: Clear DNSimple environment variables before each test.

    ``HOME`` points at an empty directory so a real ``~/.dnsimple`` is never read.
    """
    import os

    for key in list(os.environ.keys()):
        if key.startswith("DNSIMPLE_"):
            monkeypatch.delenv(key, raising=False)

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))

    yield


@pytest.fixture
def resolver():
    return CredentialResolver(load_dotenv=False)


@pytest.fixture
def credentials_file(tmp_path):
    """Factory writing a YAML credentials file and returning its path."""

    def write(content, name="dnsimple.yml"):
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content)
        else:
            path.write_text(yaml.safe_dump(content))
        return path

    return write


@pytest.fixture
def make_client(resolver):
    """Factory building a Client whose requests go to a RecordingHandler."""

    def build(responses, **settings):
        settings.setdefault("username", "alice@example.com")
        settings.setdefault("api_token", "s3cr3t")
        handler = RecordingHandler(responses)
        client = Client(resolver=resolver, transport=httpx.MockTransport(handler), **settings)
        return client, handler

    return build
