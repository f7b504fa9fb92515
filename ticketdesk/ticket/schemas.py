# ticketdesk/ticket/schemas.py
from pydantic import AliasChoices, BaseModel, Field


def _either(name: str) -> AliasChoices:
    # accept the PascalCase the browser form sends as well as plain names
    return AliasChoices(name.capitalize(), name)


class TicketCreate(BaseModel):
    name: str = Field(..., min_length=1, validation_alias=_either("name"))
    description: str = Field(..., min_length=1, validation_alias=_either("description"))
    category: str = Field(..., min_length=1, validation_alias=_either("category"))


class TicketCreated(BaseModel):
    ticket_id: int = Field(serialization_alias="TicketID")
    ticket_number: int = Field(serialization_alias="TicketNumber")

    model_config = {"from_attributes": True}


class TicketOut(TicketCreated):
    name: str = Field(serialization_alias="Name")
    description: str = Field(serialization_alias="Description")
    category: str = Field(serialization_alias="Category")
    assigned_to: str = Field(serialization_alias="AssignedTo")
    status: str = Field(serialization_alias="Status")
    created_at: str = Field(serialization_alias="CreatedAt")
