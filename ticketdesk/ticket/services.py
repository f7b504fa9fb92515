# ticketdesk/ticket/services.py
import logging
import random
from datetime import datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from ticketdesk.ticket.models import Ticket
from ticketdesk.ticket.schemas import TicketCreate

logger = logging.getLogger(__name__)

DEFAULT_STATUS = "Open"
TIMESTAMP_FORMAT = "%d-%m-%Y %H:%M:%S"
# inserts retried when another request takes the same number first
MAX_INSERT_ATTEMPTS = 5


class InvalidCategory(ValueError):
    pass


class TicketNumbersExhausted(RuntimeError):
    pass


def find_admin(admins: dict[str, str], category: str) -> str | None:
    """Return the admin handling ``category``, compared case-insensitively."""
    for admin_category, admin in admins.items():
        if admin_category.casefold() == category.casefold():
            return admin
    return None


def generate_ticket_number(db: Session, category: str) -> int:
    """Pick a random 4-digit number not yet used inside ``category``."""
    taken = {
        n for (n,) in db.query(Ticket.ticket_number).filter(Ticket.category == category)
    }
    if len(taken) >= 9000:
        raise TicketNumbersExhausted(category)
    while True:
        number = random.randint(1000, 9999)
        if number not in taken:
            return number
        logger.debug("Ticket number %s already used in %s, retrying", number, category)


def get_all_tickets(db: Session) -> list[Ticket]:
    return db.query(Ticket).order_by(Ticket.ticket_id).all()


def get_ticket(db: Session, ticket_id: int | str) -> Ticket | None:
    """Look a ticket up by id; ids that are not integers simply match nothing."""
    try:
        key = int(ticket_id)
    except ValueError:
        key = None
    ticket = None
    if key is not None:
        ticket = db.query(Ticket).filter(Ticket.ticket_id == key).first()
    if ticket is None:
        logger.info("Ticket %s not found", ticket_id)
    return ticket


def create_ticket(db: Session, payload: TicketCreate, admins: dict[str, str]) -> Ticket:
    admin = find_admin(admins, payload.category)
    if admin is None:
        raise InvalidCategory(payload.category)

    category = payload.category.upper()
    created_at = datetime.now().strftime(TIMESTAMP_FORMAT)
    for _ in range(MAX_INSERT_ATTEMPTS):
        db_ticket = Ticket(
            ticket_number=generate_ticket_number(db, category),
            name=payload.name,
            description=payload.description,
            category=category,
            assigned_to=admin,
            status=DEFAULT_STATUS,
            created_at=created_at,
        )
        number = db_ticket.ticket_number
        db.add(db_ticket)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            logger.warning(
                "Ticket number %s in %s was taken concurrently, retrying", number, category
            )
            continue
        db.refresh(db_ticket)
        logger.info(
            "Created ticket %s (#%s) in %s, assigned to %s",
            db_ticket.ticket_id, db_ticket.ticket_number, category, db_ticket.assigned_to,
        )
        return db_ticket
    raise TicketNumbersExhausted(category)
