from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from complaint_tracker.db.session import SessionLocal
from complaint_tracker.service.complaint.errors import StorageError

logger = logging.getLogger(__name__)


@contextmanager
def session_scope() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("database operation failed, rolled back")
        raise StorageError(str(exc)) from exc
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
