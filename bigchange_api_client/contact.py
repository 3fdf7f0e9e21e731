"""
Contact records from the BigChange web service.

A :class:`Contact` is a read-only snapshot of one BigChange contact,
built from a single ``ContactDetail`` query.  Values are stored exactly
as the service returns them.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, Mapping, Tuple, Union

from .auth import AuthContext
from .client import BigChangeClient, build_query
from .exceptions import BigChangeSchemaError

logger = logging.getLogger(__name__)

ContactId = Union[str, int]
DateLike = Union[str, date]

# Vendor key in the ``Result`` object -> attribute name on Contact
CONTACT_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("GroupId", "group_id"),
    ("Name", "name"),
    ("Street", "street"),
    ("PostCode", "postcode"),
    ("Town", "town"),
    ("Country", "country"),
    ("Person", "person"),
    ("Phone", "phone"),
    ("Email", "email"),
    ("Extra", "extra"),
    ("Lat", "lat"),
    ("Lng", "long"),
    ("OnStop", "on_stop"),
    ("ContactCreationDate", "creation_date"),
)


def _as_client(source: Union[BigChangeClient, AuthContext]) -> BigChangeClient:
    if isinstance(source, BigChangeClient):
        return source
    return BigChangeClient(source)


def extract_result(payload: Any) -> Mapping[str, Any]:
    """Return the ``Result`` object of a detail response.

    Raises :class:`BigChangeSchemaError` if the payload has no
    ``Result`` object.
    """
    if not isinstance(payload, Mapping) or "Result" not in payload:
        raise BigChangeSchemaError("Result")
    result = payload["Result"]
    if not isinstance(result, Mapping):
        raise BigChangeSchemaError(
            "Result", f"Expected 'Result' to be an object, got {type(result).__name__}"
        )
    return result


class Contact:
    """A single BigChange contact.

    Instances are normally created with :meth:`fetch` (or
    :meth:`BigChangeClient.get_contact`).  ``fields`` must hold every
    key in ``CONTACT_FIELDS``; other keys are dropped.  All fields are
    read-only and reflect the server state at the time of the fetch;
    there is no refresh.
    """

    def __init__(self, client: BigChangeClient, contact_id: ContactId, fields: Mapping[str, Any]) -> None:
        self._client = client
        self._contact_id = contact_id
        self._fields: Dict[str, Any] = {}
        for key, _ in CONTACT_FIELDS:
            if key not in fields:
                logger.warning("ContactDetail for %s is missing %r", contact_id, key)
                raise BigChangeSchemaError(key)
            self._fields[key] = fields[key]

    def __repr__(self) -> str:
        return f"Contact(contact_id={self._contact_id!r}, name={self.name!r})"

    @classmethod
    def fetch(cls, source: Union[BigChangeClient, AuthContext], contact_id: ContactId) -> "Contact":
        """Run a ``ContactDetail`` query and return the hydrated contact.

        Parameters
        ----------
        source : BigChangeClient or AuthContext
            Client to query with.  An AuthContext is wrapped in a new
            client.
        contact_id : str or int
            The BigChange ID of the contact.

        Raises
        ------
        BigChangeTransportError, BigChangeHTTPError, BigChangeDecodeError
            If the query fails.
        BigChangeSchemaError
            If the response lacks ``Result`` or one of the contact keys.
        """
        client = _as_client(source)
        payload = client.query(build_query("ContactDetail", ("contactId", contact_id)))
        return cls.from_response(client, contact_id, payload)

    @classmethod
    def from_response(cls, client: BigChangeClient, contact_id: ContactId, payload: Any) -> "Contact":
        """Build a contact from a parsed ``ContactDetail`` response."""
        return cls(client, contact_id, extract_result(payload))

    def as_dict(self) -> Dict[str, Any]:
        """Return the contact fields keyed by their BigChange names."""
        return dict(self._fields)

    def list_jobs(self, start: DateLike, end: DateLike) -> Any:
        """List jobs assigned to this contact between ``start`` and ``end``.

        Dates are ``YYYY-MM-DD`` strings (passed through unchecked) or
        :class:`datetime.date` objects.  The parsed response is returned
        unmodified, ``Result`` wrapper included.
        """
        return self._client.query(
            build_query(
                "Jobslist",
                ("Contactid", self._contact_id),
                ("Start", start),
                ("End", end),
            )
        )

    @property
    def contact_id(self) -> ContactId:
        return self._contact_id

    @property
    def group_id(self) -> Any:
        return self._fields["GroupId"]

    @property
    def name(self) -> Any:
        return self._fields["Name"]

    @property
    def street(self) -> Any:
        return self._fields["Street"]

    @property
    def postcode(self) -> Any:
        return self._fields["PostCode"]

    @property
    def town(self) -> Any:
        return self._fields["Town"]

    @property
    def country(self) -> Any:
        return self._fields["Country"]

    @property
    def person(self) -> Any:
        return self._fields["Person"]

    @property
    def phone(self) -> Any:
        return self._fields["Phone"]

    @property
    def email(self) -> Any:
        return self._fields["Email"]

    @property
    def extra(self) -> Any:
        return self._fields["Extra"]

    @property
    def lat(self) -> Any:
        return self._fields["Lat"]

    @property
    def long(self) -> Any:
        """Longitude, from the vendor's ``Lng`` key."""
        return self._fields["Lng"]

    @property
    def on_stop(self) -> Any:
        return self._fields["OnStop"]

    @property
    def creation_date(self) -> Any:
        return self._fields["ContactCreationDate"]


def fetch_contact(source: Union[BigChangeClient, AuthContext], contact_id: ContactId) -> Contact:
    """Shortcut for :meth:`Contact.fetch`."""
    return Contact.fetch(source, contact_id)
