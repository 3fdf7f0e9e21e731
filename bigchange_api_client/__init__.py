"""
Python client for interacting with the BigChange web service.

This package provides an :class:`AuthContext` holding the API key and
basic credentials, a :class:`BigChangeClient` that sends queries to the
BigChange ``services.ashx`` endpoint, and a :class:`Contact` entity
hydrated from a single ``ContactDetail`` query.

Examples
--------

```python
from bigchange_api_client import AuthContext, BigChangeClient

auth = AuthContext("YOUR_API_KEY", "YOUR_USERNAME", "YOUR_PASSWORD")
client = BigChangeClient(auth)

contact = client.get_contact(1234)
print(contact.name, contact.town)

jobs = contact.list_jobs("2021-01-01", "2021-01-31")
for job in jobs["Result"]:
    print(job)
```

Credentials can also be read from ``BIGCHANGE_API_KEY``,
``BIGCHANGE_USERNAME`` and ``BIGCHANGE_PASSWORD`` with
:meth:`AuthContext.from_env`.
"""

from .auth import AuthContext
from .client import BigChangeClient, ErrorKind, QueryResult, build_query
from .contact import Contact, fetch_contact
from .exceptions import (
    BigChangeAPIError,
    BigChangeDecodeError,
    BigChangeError,
    BigChangeHTTPError,
    BigChangeSchemaError,
    BigChangeTransportError,
)

__all__ = [
    "AuthContext",
    "BigChangeClient",
    "Contact",
    "ErrorKind",
    "QueryResult",
    "build_query",
    "fetch_contact",
    "BigChangeError",
    "BigChangeAPIError",
    "BigChangeDecodeError",
    "BigChangeHTTPError",
    "BigChangeSchemaError",
    "BigChangeTransportError",
]
