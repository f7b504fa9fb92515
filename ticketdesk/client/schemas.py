# ticketdesk/client/schemas.py
from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel, to_pascal

# Identifiers are opaque: whatever the service sent is kept as is
Identifier = str | int


def wire_names(name: str, *extra: str) -> AliasChoices:
    """Every key a response may use for ``name``: camel, Pascal and snake."""
    return AliasChoices(to_camel(name), to_pascal(name), name, *extra)


class TicketDraft(BaseModel):
    name: str
    description: str
    category: str


class CreatedTicket(BaseModel):
    ticket_id: Identifier = Field(validation_alias=wire_names("ticket_id", "TicketID"))
    ticket_number: Identifier = Field(
        validation_alias=wire_names("ticket_number", "TicketNumber")
    )

    model_config = ConfigDict(frozen=True)


class Ticket(BaseModel):
    ticket_id: Identifier | None = Field(
        default=None, validation_alias=wire_names("ticket_id", "TicketID")
    )
    ticket_number: Identifier | None = Field(
        default=None, validation_alias=wire_names("ticket_number", "TicketNumber")
    )
    name: str = Field(validation_alias=wire_names("name"))
    description: str = Field(validation_alias=wire_names("description"))
    category: str = Field(validation_alias=wire_names("category"))
    assigned_to: str = Field(validation_alias=wire_names("assigned_to"))
    status: str = Field(validation_alias=wire_names("status"))
    created_at: str = Field(validation_alias=wire_names("created_at"))

    # keys beyond the modelled ones are kept, not dropped
    model_config = ConfigDict(frozen=True, extra="allow")


__all__ = ["CreatedTicket", "Identifier", "Ticket", "TicketDraft", "wire_names"]
