# tests/conftest.py
import pytest
from fastapi.testclient import TestClient
from loguru import logger
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.main import app
from app.ticket.models import Ticket
from app.ticket.repository import get_ticket_store, new_ticket_id


class InMemoryTicketStore:
    """Dict backed stand-in for SqlTicketStore."""

    def __init__(self):
        self.tickets: dict[str, Ticket] = {}

    def find_all(self):
        return list(self.tickets.values())

    def find_by_id(self, ticket_id):
        return self.tickets.get(ticket_id)

    def save(self, ticket):
        existing = self.tickets.get(ticket.id) if ticket.id else None
        if existing is None:
            ticket.id = new_ticket_id()
            ticket.on_create()
            self.tickets[ticket.id] = ticket
            return ticket
        existing.description = ticket.description
        existing.completed = ticket.completed
        existing.on_update()
        return existing

    def delete(self, ticket):
        ticket_id = ticket.id if isinstance(ticket, Ticket) else ticket
        self.tickets.pop(ticket_id, None)

    def find_by_description_contains(self, text):
        return [t for t in self.tickets.values() if text in t.description]


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture
def client(db_session):
    app.dependency_overrides[get_db] = lambda: db_session
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def memory_store():
    return InMemoryTicketStore()


@pytest.fixture
def memory_client(memory_store):
    app.dependency_overrides[get_ticket_store] = lambda: memory_store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def log_messages():
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    try:
        yield messages
    finally:
        logger.remove(handler_id)
