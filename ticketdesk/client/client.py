# ticketdesk/client/client.py
from collections.abc import Mapping
from typing import Any, Literal
from urllib.parse import quote

import httpx
from pydantic import ValidationError
from pydantic.alias_generators import to_camel, to_pascal

from ticketdesk.client.results import ClientResult, ErrorKind
from ticketdesk.client.schemas import CreatedTicket, Identifier, Ticket, TicketDraft
from ticketdesk.client.transport import TRANSPORT_ERRORS, Transport
from ticketdesk.core.config import Settings

Casing = Literal["pascal", "camel"]

_KEY_STYLES = {"pascal": to_pascal, "camel": to_camel}

CREATE_PATH = "/api/create"
TICKETS_PATH = "/api/tickets"
TICKET_BY_ID_PATH = "/api/ticket/id/{ticket_id}"

# raised while decoding a 2xx body that is not what the endpoint promises
_BAD_BODY = (ValueError, ValidationError, TypeError)


class TicketClient:
    """Async client for the ticket service.

    Every operation makes at most one round trip and resolves to a
    :class:`ClientResult`; nothing is raised, retried, cached or logged.
    """

    def __init__(
        self,
        base_address: str,
        transport: Transport | None = None,
        *,
        casing: Casing = "pascal",
    ) -> None:
        """
        Args:
            base_address: Root URL prepended to every path.
            transport: Anything with ``async send(httpx.Request)``. When
                omitted the client owns an ``httpx.AsyncClient``.
            casing: Key style used for request bodies.
        """
        if casing not in _KEY_STYLES:
            raise ValueError(f"unknown casing {casing!r}")
        self.base_address = base_address.rstrip("/")
        self.casing = casing
        self._owns_transport = transport is None
        self.transport: Transport = transport if transport is not None else httpx.AsyncClient()

    @classmethod
    def from_settings(cls, settings: Settings, transport: Transport | None = None) -> "TicketClient":
        return cls(settings.TICKET_API_URL, transport, casing=settings.WIRE_CASING)

    async def aclose(self) -> None:
        if self._owns_transport:
            await self.transport.aclose()

    async def __aenter__(self) -> "TicketClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    def _url(self, path: str) -> str:
        return f"{self.base_address}{path}"

    async def _send(self, method: str, path: str, body: Any = None) -> httpx.Response:
        if body is None:
            request = httpx.Request(method, self._url(path))
        else:
            request = httpx.Request(method, self._url(path), json=body)
        return await self.transport.send(request)

    def _encode_draft(self, draft: TicketDraft) -> dict[str, str]:
        key = _KEY_STYLES[self.casing]
        return {key(field): value for field, value in draft.model_dump().items()}

    async def create(
        self, draft: TicketDraft | Mapping[str, Any]
    ) -> ClientResult[CreatedTicket]:
        """POST the draft. Not idempotent: each call may open a new ticket.

        A mapping is validated into a :class:`TicketDraft` first; a draft of
        the wrong shape is InvalidInput and never reaches the transport.
        """
        if not isinstance(draft, TicketDraft):
            try:
                draft = TicketDraft.model_validate(draft)
            except ValidationError:
                return ClientResult.failure(ErrorKind.INVALID_INPUT)
        try:
            response = await self._send("POST", CREATE_PATH, self._encode_draft(draft))
        except TRANSPORT_ERRORS:
            return ClientResult.failure(ErrorKind.TRANSPORT_FAILED)
        if not response.is_success:
            return ClientResult.failure(ErrorKind.CREATION_FAILED)
        try:
            created = CreatedTicket.model_validate(response.json())
        except _BAD_BODY:
            return ClientResult.failure(ErrorKind.TRANSPORT_FAILED, response.status_code)
        return ClientResult.success(created)

    async def list(self) -> ClientResult[tuple[Ticket, ...]]:
        try:
            response = await self._send("GET", TICKETS_PATH)
        except TRANSPORT_ERRORS:
            return ClientResult.failure(ErrorKind.TRANSPORT_FAILED)
        if not response.is_success:
            return ClientResult.failure(ErrorKind.TRANSPORT_FAILED, response.status_code)
        try:
            body = response.json()
            # an empty collection may come back as null
            if body is None:
                body = []
            if not isinstance(body, list):
                raise TypeError("expected a JSON array of tickets")
            tickets = tuple(Ticket.model_validate(item) for item in body)
        except _BAD_BODY:
            return ClientResult.failure(ErrorKind.TRANSPORT_FAILED, response.status_code)
        return ClientResult.success(tickets)

    async def get_by_id(self, ticket_id: Identifier) -> ClientResult[Ticket]:
        if ticket_id is None or str(ticket_id) == "":
            return ClientResult.failure(ErrorKind.INVALID_INPUT)
        path = TICKET_BY_ID_PATH.format(ticket_id=quote(str(ticket_id), safe=""))
        try:
            response = await self._send("GET", path)
        except TRANSPORT_ERRORS:
            return ClientResult.failure(ErrorKind.TRANSPORT_FAILED)
        if response.status_code == 404:
            return ClientResult.failure(ErrorKind.NOT_FOUND)
        if not response.is_success:
            return ClientResult.failure(ErrorKind.TRANSPORT_FAILED, response.status_code)
        try:
            ticket = Ticket.model_validate(response.json())
        except _BAD_BODY:
            return ClientResult.failure(ErrorKind.TRANSPORT_FAILED, response.status_code)
        return ClientResult.success(ticket)


__all__ = ["TicketClient"]
