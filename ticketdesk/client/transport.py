# ticketdesk/client/transport.py
from typing import Protocol

import httpx


class Transport(Protocol):
    """Sends one request and returns its response.

    ``httpx.AsyncClient`` satisfies this as is; tests plug in fakes.
    """

    async def send(self, request: httpx.Request) -> httpx.Response: ...


# Failures of the exchange itself, as opposed to an HTTP status
TRANSPORT_ERRORS = (httpx.HTTPError, httpx.InvalidURL)


__all__ = ["TRANSPORT_ERRORS", "Transport"]
