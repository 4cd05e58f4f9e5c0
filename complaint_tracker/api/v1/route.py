from datetime import datetime, timezone
from typing import NoReturn

from fastapi import APIRouter, HTTPException

from complaint_tracker.model.complaint.complaint_request import (
    ComplaintCreateRequest,
    ComplaintStatusUpdateRequest,
)
from complaint_tracker.model.complaint.complaint_response import (
    ComplaintResponse,
    ComplaintStatsResponse,
    HealthResponse,
)
from complaint_tracker.model.complaint.complaint_status import ComplaintStatus
from complaint_tracker.service.complaint.complaint import (
    create_complaint,
    get_all_complaints,
    get_complaint_by_id,
    get_complaints_by_email,
    update_complaint_status,
)
from complaint_tracker.service.complaint.errors import (
    ComplaintError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from complaint_tracker.service.complaint.query import count_by_status, filter_complaints

api_router = APIRouter()


def _raise_http(exc: ComplaintError) -> NoReturn:
    if isinstance(exc, ValidationError):
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    if isinstance(exc, NotFoundError):
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    if isinstance(exc, StorageError):
        raise HTTPException(status_code=503, detail="complaint store unavailable") from exc
    raise exc


@api_router.get("/healthcheck", response_model=HealthResponse)
def healthcheck():
    return HealthResponse(status="ok", timestamp=datetime.now(timezone.utc))


@api_router.post("/complaints", response_model=ComplaintResponse, status_code=201)
def create_complaint_endpoint(req: ComplaintCreateRequest):
    try:
        return create_complaint(req.title, req.description, req.customer_email)
    except ComplaintError as exc:
        _raise_http(exc)


@api_router.get("/complaints", response_model=list[ComplaintResponse])
def list_complaints_endpoint(search: str | None = None, status: ComplaintStatus | None = None):
    try:
        complaints = get_all_complaints()
    except ComplaintError as exc:
        _raise_http(exc)
    if search is None and status is None:
        return complaints
    return filter_complaints(complaints, search=search, status=status)


@api_router.get("/complaints/stats", response_model=ComplaintStatsResponse)
def complaint_stats_endpoint():
    try:
        complaints = get_all_complaints()
    except ComplaintError as exc:
        _raise_http(exc)
    return ComplaintStatsResponse(**count_by_status(complaints))


@api_router.get("/complaints/by-email", response_model=list[ComplaintResponse])
def complaints_by_email_endpoint(customer_email: str):
    try:
        return get_complaints_by_email(customer_email)
    except ComplaintError as exc:
        _raise_http(exc)


@api_router.get("/complaints/{complaint_id}", response_model=ComplaintResponse | None)
def complaint_by_id_endpoint(complaint_id: int):
    try:
        return get_complaint_by_id(complaint_id)
    except ComplaintError as exc:
        _raise_http(exc)


@api_router.patch("/complaints/{complaint_id}/status", response_model=ComplaintResponse)
def update_complaint_status_endpoint(complaint_id: int, req: ComplaintStatusUpdateRequest):
    try:
        return update_complaint_status(complaint_id, req.status)
    except ComplaintError as exc:
        _raise_http(exc)
