# app/ticket/services.py
from loguru import logger

from app.ticket.builder import build_ticket
from app.ticket.models import Ticket
from app.ticket.repository import TicketStore
from app.ticket.schemas import TicketIn


def list_tickets(store: TicketStore, description: str | None = None) -> list[Ticket]:
    if description:
        return store.find_by_description_contains(description)
    return store.find_all()


def get_ticket(store: TicketStore, ticket_id: str) -> Ticket | None:
    return store.find_by_id(ticket_id)


def mark_completed(store: TicketStore, ticket_id: str) -> Ticket | None:
    ticket = store.find_by_id(ticket_id)
    if not ticket:
        return None
    ticket.completed = True
    saved = store.save(ticket)
    logger.info("Ticket {} marked completed", saved.id)
    return saved


def save_ticket(store: TicketStore, payload: TicketIn) -> Ticket:
    """Create or update a ticket from an already validated payload.

    A payload id that matches a stored ticket updates it; any other id is
    ignored and the ticket is created with a fresh one.
    """
    ticket = build_ticket(payload.description, payload.id)
    ticket.completed = payload.completed
    return store.save(ticket)


def delete_ticket_by_id(store: TicketStore, ticket_id: str) -> None:
    store.delete(build_ticket("", ticket_id))


def delete_ticket(store: TicketStore, payload: TicketIn) -> None:
    if not payload.id:
        logger.debug("Delete request without an id, nothing to do")
        return
    delete_ticket_by_id(store, payload.id)
