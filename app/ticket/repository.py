# app/ticket/repository.py
from typing import Protocol
from uuid import uuid4

from fastapi import Depends
from loguru import logger
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.ticket.models import Ticket


def new_ticket_id() -> str:
    return uuid4().hex


class TicketStore(Protocol):
    def find_all(self) -> list[Ticket]: ...

    def find_by_id(self, ticket_id: str) -> Ticket | None: ...

    def save(self, ticket: Ticket) -> Ticket: ...

    def delete(self, ticket: Ticket | str) -> None: ...

    def find_by_description_contains(self, text: str) -> list[Ticket]: ...


class SqlTicketStore:
    """TicketStore over a SQLAlchemy session, one commit per write."""

    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> list[Ticket]:
        return self.db.query(Ticket).all()

    def find_by_id(self, ticket_id: str) -> Ticket | None:
        if not ticket_id:
            return None
        return self.db.get(Ticket, ticket_id)

    def save(self, ticket: Ticket) -> Ticket:
        existing = self.find_by_id(ticket.id) if ticket.id else None
        try:
            if existing is None:
                ticket.id = new_ticket_id()
                ticket.on_create()
                self.db.add(ticket)
                stored = ticket
            else:
                if existing is not ticket:
                    existing.description = ticket.description
                    existing.completed = ticket.completed
                existing.on_update()
                stored = existing
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(stored)
        logger.info("Ticket {} {}", stored.id, "created" if existing is None else "updated")
        return stored

    def delete(self, ticket: Ticket | str) -> None:
        ticket_id = ticket.id if isinstance(ticket, Ticket) else ticket
        existing = self.find_by_id(ticket_id)
        if existing is None:
            logger.debug("Ticket {} already absent", ticket_id)
            return
        try:
            self.db.delete(existing)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        logger.info("Ticket {} deleted", ticket_id)

    def find_by_description_contains(self, text: str) -> list[Ticket]:
        return self.db.query(Ticket).filter(Ticket.description.contains(text, autoescape=True)).all()


def get_ticket_store(db: Session = Depends(get_db)) -> TicketStore:
    return SqlTicketStore(db)
