# app/core/errors.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from app.ticket.schemas import ValidationReport
from app.ticket.validation import failures_from_request_errors, from_exception, from_failures


def report_response(report: ValidationReport, status_code: int = 400) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=report.model_dump(by_alias=True))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    failures = failures_from_request_errors(exc.errors())
    logger.warning("Rejected {} {}: {}", request.method, request.url.path, failures)
    return report_response(from_failures(failures))


async def catch_unhandled(request: Request, call_next):
    # Every unhandled failure is answered as a 400 with the exception message
    try:
        return await call_next(request)
    except Exception as exc:
        logger.opt(exception=exc).error("Unhandled error on {} {}", request.method, request.url.path)
        return report_response(from_exception(exc))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.middleware("http")(catch_unhandled)
