from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Optional

import pytest
import requests

from bigchange_api_client import AuthContext, BigChangeClient


class _ResponseStub:
    def __init__(self, payload: Any = None, status_code: int = 200, text: Optional[str] = None) -> None:
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(payload)

    def json(self) -> Any:
        return json.loads(self.text)


class _TransportStub:
    """Replacement for ``requests.get`` returning queued responses."""

    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []
        self._responses: List[Any] = []

    def queue(self, *responses: Any) -> None:
        self._responses.extend(responses)

    def reply(self, payload: Any = None, status_code: int = 200, text: Optional[str] = None) -> None:
        self.queue(_ResponseStub(payload, status_code=status_code, text=text))

    def fail(self, exc: Exception) -> None:
        self.queue(exc)

    def __call__(self, url: str, **kwargs: Any) -> _ResponseStub:
        self.calls.append({"url": url, **kwargs})
        if not self._responses:
            raise RuntimeError("No stub response configured")
        resp = self._responses.pop(0)
        if isinstance(resp, Exception):
            raise resp
        return resp


def _contact_result(**overrides: Any) -> Dict[str, Any]:
    result = {
        "GroupId": "G1",
        "Name": "Acme",
        "Street": "1 High Street",
        "PostCode": "LS1 1AA",
        "Town": "Leeds",
        "Country": "UK",
        "Person": "Jo Bloggs",
        "Phone": "0113 000 0000",
        "Email": "jo@acme.example",
        "Extra": None,
        "Lat": 53.7997,
        "Lng": -1.5492,
        "OnStop": False,
        "ContactCreationDate": "2021-03-04T10:00:00",
    }
    result.update(overrides)
    return result


@pytest.fixture
def contact_result() -> Callable[..., Dict[str, Any]]:
    """Factory for a complete ``ContactDetail`` Result object."""
    return _contact_result


@pytest.fixture
def transport(monkeypatch: pytest.MonkeyPatch) -> _TransportStub:
    stub = _TransportStub()
    monkeypatch.setattr(requests, "get", stub)
    return stub


@pytest.fixture
def auth() -> AuthContext:
    return AuthContext("k-123", "user", "pass")


@pytest.fixture
def client(auth: AuthContext) -> BigChangeClient:
    return BigChangeClient(auth)
