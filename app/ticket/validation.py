# app/ticket/validation.py
"""Field checks for incoming tickets and the error report built from them."""
from typing import Any, Callable, NamedTuple, Sequence

from pydantic import ValidationError

from app.ticket.schemas import TicketIn, ValidationReport


class FieldFailure(NamedTuple):
    field: str
    message: str


Check = Callable[[TicketIn], FieldFailure | None]


def description_not_null(payload: TicketIn) -> FieldFailure | None:
    if payload.description is None:
        return FieldFailure("description", "must not be null")
    return None


def description_not_blank(payload: TicketIn) -> FieldFailure | None:
    # null is reported by description_not_null
    if payload.description is not None and not payload.description.strip():
        return FieldFailure("description", "must not be blank")
    return None


TICKET_CHECKS: tuple[Check, ...] = (
    description_not_null,
    description_not_blank,
)


def validate_ticket(payload: TicketIn, checks: Sequence[Check] = TICKET_CHECKS) -> list[FieldFailure]:
    """Run every check in order and collect all failures."""
    failures = []
    for check in checks:
        failure = check(payload)
        if failure is not None:
            failures.append(failure)
    return failures


def from_failures(failures: Sequence[FieldFailure]) -> ValidationReport:
    return ValidationReport(
        error_message=f"Validation failed. {len(failures)} error(s)",
        errors=[f.message for f in failures],
    )


def from_exception(exc: Exception) -> ValidationReport:
    return ValidationReport(error_message=str(exc), errors=[])


def failures_from_request_errors(errors: Sequence[dict[str, Any]]) -> list[FieldFailure]:
    """Turn FastAPI/pydantic request errors into field failures."""
    failures = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        failures.append(FieldFailure(".".join(loc) or "body", err.get("msg", "invalid value")))
    return failures


def parse_ticket(body: dict[str, Any]) -> tuple[TicketIn | None, list[FieldFailure]]:
    """Parse a raw ticket body, collecting type errors and field check failures together."""
    try:
        payload = TicketIn.model_validate(body)
    except ValidationError as exc:
        failures = failures_from_request_errors(exc.errors())
        if not any(f.field.split(".")[0] == "description" for f in failures):
            # description parsed fine, so it is a str or missing
            raw = TicketIn.model_construct(description=body.get("description"))
            failures.extend(validate_ticket(raw))
        return None, failures
    return payload, validate_ticket(payload)
