# ticketdesk/client/views.py
"""Rendering state for the ticket UI.

These functions sit between :class:`TicketClient` results and whatever draws
the screen. They never touch the network and never mutate a ticket.
"""
from dataclasses import dataclass, field
from typing import Any

from ticketdesk.client.results import ClientResult, ErrorKind
from ticketdesk.client.schemas import CreatedTicket, Ticket


@dataclass(frozen=True)
class ViewState:
    kind: str
    message: str | None = None
    cards: tuple[dict[str, Any], ...] = field(default_factory=tuple)


MESSAGES = {
    "created": "Ticket created successfully",
    "create_error": "Error creating ticket",
    "prompt": "Please enter ticket ID",
    "not_found": "Ticket not found",
    "empty": "No tickets found",
    "error": "Could not reach the ticket service",
}


def ticket_fields(ticket: Ticket) -> dict[str, Any]:
    """Fields received for ``ticket``, values untouched; ids only if sent."""
    return ticket.model_dump(exclude_unset=True)


def _error_state(result: ClientResult) -> ViewState:
    kind = result.error.kind
    if kind is ErrorKind.INVALID_INPUT:
        return ViewState("prompt", MESSAGES["prompt"])
    if kind is ErrorKind.NOT_FOUND:
        return ViewState("not_found", MESSAGES["not_found"])
    if kind is ErrorKind.CREATION_FAILED:
        return ViewState("create_error", MESSAGES["create_error"])
    return ViewState("error", MESSAGES["error"])


def creation_view(result: ClientResult[CreatedTicket]) -> ViewState:
    if not result.ok:
        return _error_state(result)
    created = result.value
    card = {"ticket_id": created.ticket_id, "ticket_number": created.ticket_number}
    return ViewState("created", MESSAGES["created"], (card,))


def ticket_view(result: ClientResult[Ticket]) -> ViewState:
    if not result.ok:
        return _error_state(result)
    return ViewState("ticket", cards=(ticket_fields(result.value),))


def ticket_list_view(result: ClientResult[tuple[Ticket, ...]]) -> ViewState:
    if not result.ok:
        return _error_state(result)
    if not result.value:
        return ViewState("empty", MESSAGES["empty"])
    return ViewState("tickets", cards=tuple(ticket_fields(t) for t in result.value))
