# ticketdesk/ticket/models.py
from sqlalchemy import Column, Integer, String, UniqueConstraint
from ticketdesk.core.database import Base


class Ticket(Base):
    __tablename__ = "tickets"
    # ticket numbers only need to be unique inside a category
    __table_args__ = (UniqueConstraint("category", "ticket_number"),)

    ticket_id = Column(Integer, primary_key=True, index=True)
    ticket_number = Column(Integer, nullable=False)
    name = Column(String, nullable=False)
    description = Column(String, nullable=False)
    category = Column(String, index=True, nullable=False)
    assigned_to = Column(String, nullable=False)
    status = Column(String, default="Open", index=True)
    created_at = Column(String, nullable=False)
