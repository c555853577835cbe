# app/ticket/builder.py
from app.ticket.models import Ticket


def build_ticket(description: str, ticket_id: str | None = None) -> Ticket:
    """Return a new, unsaved Ticket with the given description and optional id."""
    ticket = Ticket(description=description, completed=False)
    if ticket_id is not None:
        ticket.id = ticket_id
    return ticket
