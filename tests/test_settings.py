from __future__ import annotations

import pydantic
import pytest

from config.settings import Settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.browser_client_identity == "browser-client"
    assert settings.token_ttl_seconds > 0


def test_browser_client_identity_must_not_be_empty():
    with pytest.raises(pydantic.ValidationError):
        Settings(_env_file=None, browser_client_identity="")


def test_empty_identity_from_environment_is_rejected(monkeypatch):
    monkeypatch.setenv("BROWSER_CLIENT_IDENTITY", "")

    with pytest.raises(pydantic.ValidationError):
        Settings(_env_file=None)
