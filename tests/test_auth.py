from __future__ import annotations

import base64

import pytest

from bigchange_api_client import AuthContext
from bigchange_api_client.auth import DEFAULT_BASE_URL, encode_basic_auth


@pytest.mark.parametrize(
    "username, password",
    [
        ("user", "pass"),
        ("", ""),
        ("user", ""),
        ("", "pass"),
        ("us:er", "pa:ss"),
        ("jöhn", "pässwörd"),
    ],
)
def test_basic_auth_token_is_base64_of_username_colon_password(username: str, password: str) -> None:
    auth = AuthContext("key", username, password)

    expected = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    assert auth.basic_auth_token == expected
    assert encode_basic_auth(username, password) == expected


def test_known_token_value() -> None:
    assert AuthContext("key", "user", "pass").basic_auth_token == "dXNlcjpwYXNz"


def test_accessors_and_default_base_url() -> None:
    auth = AuthContext("k-123", "user", "pass")

    assert auth.api_key == "k-123"
    assert auth.base_url == DEFAULT_BASE_URL
    assert auth.base_url == "https://webservice.bigchangeapps.com/v01/services.ashx?"


def test_base_url_override() -> None:
    auth = AuthContext("k", "u", "p", base_url="https://sandbox.example/services.ashx?")

    assert auth.base_url == "https://sandbox.example/services.ashx?"


def test_auth_context_is_immutable() -> None:
    auth = AuthContext("k", "u", "p")

    with pytest.raises(AttributeError):
        auth.api_key = "other"  # type: ignore[misc]
    with pytest.raises(AttributeError):
        auth._basic_auth_token = "forged"
    with pytest.raises(AttributeError):
        del auth.base_url  # type: ignore[misc]

    assert auth.api_key == "k"


def test_repr_hides_secrets() -> None:
    auth = AuthContext("secret-key", "user", "pass")

    text = repr(auth)

    assert "secret-key" not in text
    assert auth.basic_auth_token not in text


def test_from_env_reads_credentials() -> None:
    env = {
        "BIGCHANGE_API_KEY": "k-env",
        "BIGCHANGE_USERNAME": "user",
        "BIGCHANGE_PASSWORD": "pass",
    }

    auth = AuthContext.from_env(env)

    assert auth.api_key == "k-env"
    assert auth.basic_auth_token == "dXNlcjpwYXNz"
    assert auth.base_url == DEFAULT_BASE_URL


def test_from_env_base_url_override() -> None:
    env = {
        "BIGCHANGE_API_KEY": "k",
        "BIGCHANGE_USERNAME": "u",
        "BIGCHANGE_PASSWORD": "",
        "BIGCHANGE_BASE_URL": "http://localhost:8080/services.ashx?",
    }

    auth = AuthContext.from_env(env)

    assert auth.base_url == "http://localhost:8080/services.ashx?"
    assert auth.basic_auth_token == encode_basic_auth("u", "")


def test_from_env_missing_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BIGCHANGE_API_KEY", "k")
    monkeypatch.setenv("BIGCHANGE_USERNAME", "u")
    monkeypatch.delenv("BIGCHANGE_PASSWORD", raising=False)

    with pytest.raises(ValueError, match="BIGCHANGE_PASSWORD"):
        AuthContext.from_env()
