# app/ticket/schemas.py
from datetime import datetime

from pydantic import BaseModel, Field


class TicketIn(BaseModel):
    """Ticket body as sent by clients.

    ``created``/``modified`` are not declared, so any values sent for them are
    dropped. ``description`` is optional here and checked by
    ``app.ticket.validation`` so every failure gets reported together.
    """

    id: str | None = None
    description: str | None = None
    completed: bool = False


class TicketOut(BaseModel):
    id: str
    description: str
    created: datetime
    modified: datetime
    completed: bool

    model_config = {"from_attributes": True}


class ValidationReport(BaseModel):
    error_message: str = Field(serialization_alias="errorMessage")
    # always serialized, even when empty
    errors: list[str] = Field(default_factory=list)
