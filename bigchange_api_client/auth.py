"""
Authentication context for the BigChange web service.

Every request to BigChange carries the account's API key in a ``key``
header together with HTTP basic credentials.  :class:`AuthContext`
holds both, encoding the basic credentials once so that any number of
clients and entities can share it read-only.
"""

from __future__ import annotations

import base64
import os
from typing import Mapping, Optional

DEFAULT_BASE_URL = "https://webservice.bigchangeapps.com/v01/services.ashx?"

# Environment variables read by AuthContext.from_env
ENV_API_KEY = "BIGCHANGE_API_KEY"
ENV_USERNAME = "BIGCHANGE_USERNAME"
ENV_PASSWORD = "BIGCHANGE_PASSWORD"
ENV_BASE_URL = "BIGCHANGE_BASE_URL"


def encode_basic_auth(username: str, password: str) -> str:
    """Return the base64 encoding of ``"username:password"``."""
    raw = f"{username}:{password}".encode("utf-8")
    return base64.b64encode(raw).decode("ascii")


class AuthContext:
    """Immutable credentials for the BigChange web service.

    Parameters
    ----------
    api_key : str
        The API key issued by BigChange.  Sent in the ``key`` header.
    username : str
        The API username.
    password : str
        The API password.
    base_url : str, optional
        Override the service URL.  Queries are appended to it verbatim,
        so it should end with ``?``.

    Notes
    -----
    The username and password are not kept; only the derived basic
    auth token is stored.
    """

    __slots__ = ("_base_url", "_api_key", "_basic_auth_token")

    def __init__(
        self,
        api_key: str,
        username: str,
        password: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        object.__setattr__(self, "_base_url", base_url)
        object.__setattr__(self, "_api_key", api_key)
        object.__setattr__(self, "_basic_auth_token", encode_basic_auth(username, password))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._base_url!r})"

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def basic_auth_token(self) -> str:
        return self._basic_auth_token

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AuthContext":
        """Build a context from ``BIGCHANGE_*`` environment variables.

        ``BIGCHANGE_API_KEY``, ``BIGCHANGE_USERNAME`` and
        ``BIGCHANGE_PASSWORD`` are required; ``BIGCHANGE_BASE_URL`` is
        optional.  A :class:`ValueError` naming the first missing
        variable is raised when a required one is unset.
        """
        env = os.environ if environ is None else environ
        values = {}
        for name in (ENV_API_KEY, ENV_USERNAME, ENV_PASSWORD):
            value = env.get(name)
            if value is None:
                raise ValueError(f"{name} must be set")
            values[name] = value
        return cls(
            values[ENV_API_KEY],
            values[ENV_USERNAME],
            values[ENV_PASSWORD],
            base_url=env.get(ENV_BASE_URL) or DEFAULT_BASE_URL,
        )
