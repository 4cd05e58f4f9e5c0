import logging
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import Select, select

from complaint_tracker.client.db.psql import session_scope
from complaint_tracker.db.models.complaint import Complaint
from complaint_tracker.model.complaint.complaint_request import (
    ComplaintCreateRequest,
    ComplaintEmailQuery,
)
from complaint_tracker.model.complaint.complaint_response import ComplaintResponse
from complaint_tracker.model.complaint.complaint_status import INITIAL_STATUS, ComplaintStatus
from complaint_tracker.service.complaint.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

# Largest value the Integer primary key can hold on every supported backend.
MAX_COMPLAINT_ID = 2**31 - 1


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _as_validation_error(exc: PydanticValidationError) -> ValidationError:
    first = exc.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ())) or None
    message = f"{field}: {first['msg']}" if field else first["msg"]
    return ValidationError(message, field=field)


def _check_id(complaint_id: Any) -> int:
    # bool is an int subclass; True must not read as complaint 1.
    if isinstance(complaint_id, bool) or not isinstance(complaint_id, int) or complaint_id < 1:
        raise ValidationError(f"id must be a positive integer, got {complaint_id!r}", field="id")
    return complaint_id


def _coerce_status(status: Any) -> ComplaintStatus:
    if isinstance(status, ComplaintStatus):
        return status
    try:
        return ComplaintStatus(status)
    except ValueError:
        allowed = ", ".join(s.value for s in ComplaintStatus)
        raise ValidationError(
            f"status must be one of {allowed}, got {status!r}", field="status"
        ) from None


def _newest_first(stmt: Select) -> Select:
    """
    created_at descending; equal timestamps fall back to id descending so
    repeated reads over unchanged data come back in the same order.
    """
    return stmt.order_by(Complaint.created_at.desc(), Complaint.id.desc())


def create_complaint(title: str, description: str, customer_email: str) -> ComplaintResponse:
    try:
        req = ComplaintCreateRequest(
            title=title, description=description, customer_email=customer_email
        )
    except PydanticValidationError as exc:
        raise _as_validation_error(exc) from exc

    now = _now()
    with session_scope() as db:
        row = Complaint(
            title=req.title,
            description=req.description,
            customer_email=req.customer_email,
            status=INITIAL_STATUS,
            created_at=now,
            updated_at=now,
        )
        db.add(row)
        db.flush()
        db.refresh(row)
        complaint = ComplaintResponse.model_validate(row)

    logger.info("complaint created id=%s email=%s", complaint.id, complaint.customer_email)
    return complaint


def get_complaint_by_id(complaint_id: int) -> ComplaintResponse | None:
    """Return the complaint, or None when no row has that id."""
    _check_id(complaint_id)
    if complaint_id > MAX_COMPLAINT_ID:
        return None
    with session_scope() as db:
        row = db.execute(select(Complaint).where(Complaint.id == complaint_id)).scalar_one_or_none()
        if row is None:
            return None
        return ComplaintResponse.model_validate(row)


def get_complaints_by_email(customer_email: str) -> list[ComplaintResponse]:
    """
    Exact, case-sensitive match on the address as it was submitted.
    "Alice@x.com" and "alice@x.com" are different customers here.
    """
    try:
        query = ComplaintEmailQuery(customer_email=customer_email)
    except PydanticValidationError as exc:
        raise _as_validation_error(exc) from exc

    stmt = _newest_first(select(Complaint).where(Complaint.customer_email == query.customer_email))
    with session_scope() as db:
        rows = db.execute(stmt).scalars().all()
        return [ComplaintResponse.model_validate(row) for row in rows]


def get_all_complaints() -> list[ComplaintResponse]:
    with session_scope() as db:
        rows = db.execute(_newest_first(select(Complaint))).scalars().all()
        return [ComplaintResponse.model_validate(row) for row in rows]


def update_complaint_status(complaint_id: int, status: ComplaintStatus | str) -> ComplaintResponse:
    """
    Move a complaint to ``status`` and stamp ``updated_at``.

    The existence check and the write share one transaction, and the row is
    selected FOR UPDATE so concurrent updates of the same complaint are
    applied one after the other.
    """
    _check_id(complaint_id)
    target = _coerce_status(status)
    if complaint_id > MAX_COMPLAINT_ID:
        logger.warning("status update for missing complaint id=%s", complaint_id)
        raise NotFoundError(complaint_id)

    with session_scope() as db:
        row = db.execute(
            select(Complaint).where(Complaint.id == complaint_id).with_for_update()
        ).scalar_one_or_none()
        if row is None:
            logger.warning("status update for missing complaint id=%s", complaint_id)
            raise NotFoundError(complaint_id)

        previous = row.status
        row.status = target
        row.updated_at = _now()
        db.flush()
        db.refresh(row)
        complaint = ComplaintResponse.model_validate(row)

    logger.info(
        "complaint status changed id=%s %s -> %s", complaint_id, previous.value, target.value
    )
    return complaint
