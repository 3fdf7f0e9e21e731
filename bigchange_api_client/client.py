"""
Client implementation for the BigChange web service.

This module defines :class:`BigChangeClient`, which sends queries to
the single BigChange ``services.ashx`` endpoint.  A query is the
vendor's flat ``action=X&key=value`` string; it is appended verbatim to
the base URL held by an :class:`~bigchange_api_client.auth.AuthContext`
and sent as an HTTPS GET.

Usage
-----

.. code-block:: python

    from bigchange_api_client import AuthContext, BigChangeClient, build_query

    auth = AuthContext("myapikey", "apiuser", "secret")
    client = BigChangeClient(auth)

    result = client.execute_query(build_query("ContactDetail", ("contactId", 1234)))
    if result.ok:
        print(result.payload["Result"]["Name"])
    else:
        print(result.kind, result.error)

Every request carries the API key in the ``key`` header and the basic
credentials in the ``Authorization`` header.  Failures are logged and
returned as a :class:`QueryResult`; :meth:`BigChangeClient.query`
raises them instead.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple, Union

import requests

from .auth import AuthContext
from .exceptions import (
    BigChangeDecodeError,
    BigChangeError,
    BigChangeHTTPError,
    BigChangeTransportError,
)

if TYPE_CHECKING:
    from .contact import Contact

logger = logging.getLogger(__name__)


def _format_value(value: Any) -> str:
    if isinstance(value, datetime):
        raise TypeError(f"Expected a date, not a datetime: {value!r}")
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    return str(value)


def build_query(action: str, *params: Tuple[str, Any]) -> str:
    """Build a query string in the vendor's ``key=value&...`` grammar.

    Parameters are emitted in the order given, after ``action``.  No
    escaping is applied: BigChange expects the raw values.  ``date``
    objects are written as ``YYYY-MM-DD``; a ``datetime`` raises
    :class:`TypeError` rather than losing its time part.

    >>> build_query("Jobslist", ("Contactid", 7), ("Start", "2021-01-01"))
    'action=Jobslist&Contactid=7&Start=2021-01-01'
    """
    parts = [f"action={action}"]
    parts.extend(f"{key}={_format_value(value)}" for key, value in params)
    return "&".join(parts)


class ErrorKind(enum.Enum):
    """Category of a failed query."""

    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    DECODE = "decode"


@dataclass(frozen=True)
class QueryResult:
    """Outcome of a single query.

    On success ``payload`` holds the parsed JSON exactly as returned,
    including the ``Result`` wrapper.  On failure ``error`` holds the
    exception describing it and ``kind`` its category.
    """

    payload: Any = None
    error: Optional[BigChangeError] = None
    kind: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, payload: Any) -> "QueryResult":
        return cls(payload=payload)

    @classmethod
    def failure(cls, kind: ErrorKind, error: BigChangeError) -> "QueryResult":
        return cls(error=error, kind=kind)

    def unwrap(self) -> Any:
        """Return the payload, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.payload


class BigChangeClient:
    """A thin client for the BigChange web service.

    Parameters
    ----------
    auth : AuthContext
        Credentials and base URL.  The context is only read, so one
        instance may be shared by any number of clients.

    Notes
    -----
    Each query is a single blocking ``requests.get`` call.  No session
    is kept between calls and failed requests are not retried.
    """

    def __init__(self, auth: AuthContext) -> None:
        self.auth = auth

    def __repr__(self) -> str:
        return f"{type(self).__name__}(auth={self.auth!r})"

    # ------------------------------------------------------------------
    # HTTP request helpers
    # ------------------------------------------------------------------
    @property
    def headers(self) -> Dict[str, str]:
        """Headers sent with every query."""
        return {
            "Content-Type": "application/json",
            "Authorization": f"Basic {self.auth.basic_auth_token}",
            "key": self.auth.api_key,
        }

    def prepare_url(self, query: str) -> str:
        """Return the request URL for ``query``: the base URL followed by the query."""
        return self.auth.base_url + query

    def execute_query(self, query: str) -> QueryResult:
        """Send ``query`` and return its outcome without raising.

        Parameters
        ----------
        query : str
            Entire query string, e.g. ``"action=ContactDetail&contactId=12"``.

        Returns
        -------
        QueryResult
            The parsed JSON on success.  On failure the result carries a
            :class:`BigChangeTransportError` when no response was
            received, a :class:`BigChangeHTTPError` for a 4xx/5xx status
            and a :class:`BigChangeDecodeError` when the body is not JSON.
        """
        url = self.prepare_url(query)
        logger.debug("GET %s", url)
        try:
            response = requests.get(url, headers=self.headers)
        except Exception as exc:
            logger.warning("Request to %s failed: %s", url, exc)
            return QueryResult.failure(
                ErrorKind.TRANSPORT,
                BigChangeTransportError(f"Failed to connect to {url}: {exc}"),
            )

        if response.status_code >= 400:
            logger.warning("%s Error for %s", response.status_code, url)
            return QueryResult.failure(
                ErrorKind.HTTP_STATUS,
                BigChangeHTTPError(
                    f"{response.status_code} Error for {url}: {response.text}",
                    status_code=response.status_code,
                    body=response.text,
                ),
            )

        try:
            payload = response.json()
        except ValueError as exc:
            logger.warning("Response from %s is not valid JSON: %s", url, exc)
            return QueryResult.failure(
                ErrorKind.DECODE,
                BigChangeDecodeError(f"Response from {url} is not valid JSON: {exc}"),
            )
        return QueryResult.success(payload)

    def query(self, query: str) -> Any:
        """Send ``query`` and return the parsed JSON response.

        Raises
        ------
        BigChangeTransportError, BigChangeHTTPError, BigChangeDecodeError
            See :meth:`execute_query`.
        """
        return self.execute_query(query).unwrap()

    # ------------------------------------------------------------------
    # Entities
    # ------------------------------------------------------------------
    def get_contact(self, contact_id: Union[str, int]) -> "Contact":
        """Fetch the contact with ``contact_id``.

        See :meth:`Contact.fetch <bigchange_api_client.contact.Contact.fetch>`.
        """
        from .contact import Contact

        return Contact.fetch(self, contact_id)
