"""Request-scoped access to the services built in the app lifespan."""

from fastapi import HTTPException, Request

from src.bootstrap import ResponseServices
from src.notes import NotesRepository


def get_services(request: Request) -> ResponseServices:
    services = getattr(request.app.state, "services", None)
    if services is None:
        detail = getattr(request.app.state, "services_error", None) or "Response services unavailable"
        raise HTTPException(status_code=503, detail=detail)
    return services


def get_notes(request: Request) -> NotesRepository:
    return request.app.state.notes
