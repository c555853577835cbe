# app/ticket/routes.py
from fastapi import APIRouter, Body, Depends, Query, Request, Response
from loguru import logger

from app.core.errors import report_response
from app.ticket.repository import TicketStore, get_ticket_store
from app.ticket.schemas import TicketIn, TicketOut
from app.ticket import services as ticket_service
from app.ticket.validation import from_failures, parse_ticket

router = APIRouter(prefix="/ticket", tags=["Tickets"])


def _location(request: Request, ticket_id: str) -> str:
    return str(request.url_for("get_ticket", ticket_id=ticket_id))


@router.get("", response_model=list[TicketOut])
def list_all(
    description: str | None = Query(default=None, description="Only tickets whose description contains this text"),
    store: TicketStore = Depends(get_ticket_store),
):
    return ticket_service.list_tickets(store, description)


@router.get("/{ticket_id}", response_model=TicketOut, name="get_ticket")
def get(ticket_id: str, store: TicketStore = Depends(get_ticket_store)):
    ticket = ticket_service.get_ticket(store, ticket_id)
    if not ticket:
        return Response(status_code=404)
    return ticket


@router.patch("/{ticket_id}", response_class=Response)
def complete(ticket_id: str, request: Request, store: TicketStore = Depends(get_ticket_store)):
    ticket = ticket_service.mark_completed(store, ticket_id)
    if not ticket:
        return Response(status_code=404)
    return Response(status_code=200, headers={"Location": _location(request, ticket.id)})


@router.api_route("", methods=["POST", "PUT"], response_model=TicketOut, status_code=201)
def save(
    request: Request,
    response: Response,
    body: dict = Body(..., description="Ticket JSON; id is optional"),
    store: TicketStore = Depends(get_ticket_store),
):
    ticket, failures = parse_ticket(body)
    if failures:
        logger.warning("Ticket rejected: {}", failures)
        return report_response(from_failures(failures))

    saved = ticket_service.save_ticket(store, ticket)
    response.headers["Location"] = _location(request, saved.id)
    return saved


@router.delete("/{ticket_id}", status_code=204, response_class=Response)
def delete(ticket_id: str, store: TicketStore = Depends(get_ticket_store)):
    ticket_service.delete_ticket_by_id(store, ticket_id)
    return Response(status_code=204)


@router.delete("", status_code=204, response_class=Response)
def delete_by_body(ticket: TicketIn = Body(...), store: TicketStore = Depends(get_ticket_store)):
    ticket_service.delete_ticket(store, ticket)
    return Response(status_code=204)
