# ticketdesk/ticket/routes.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from ticketdesk.core.database import get_db
from ticketdesk.core.config import get_settings, Settings
from ticketdesk.ticket.schemas import TicketCreate, TicketCreated, TicketOut
from ticketdesk.ticket import services as ticket_service

router = APIRouter(prefix="/api", tags=["Tickets"])


@router.post("/create", response_model=TicketCreated)
def create(
    ticket: TicketCreate,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    try:
        return ticket_service.create_ticket(db, ticket, settings.ADMINS)
    except ticket_service.InvalidCategory:
        raise HTTPException(status_code=400, detail="Invalid category")
    except ticket_service.TicketNumbersExhausted:
        raise HTTPException(status_code=409, detail="No ticket numbers left in category")


@router.get("/tickets", response_model=list[TicketOut])
def list_all(db: Session = Depends(get_db)):
    return ticket_service.get_all_tickets(db)


@router.get("/ticket/id/{ticket_id}", response_model=TicketOut)
def get(ticket_id: str, db: Session = Depends(get_db)):
    ticket = ticket_service.get_ticket(db, ticket_id)
    if not ticket:
        raise HTTPException(status_code=404, detail="Ticket not found")
    return ticket
