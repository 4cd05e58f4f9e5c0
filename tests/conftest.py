import os
from datetime import datetime, timedelta, timezone

os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
for key in ("DB_HOST", "DB_USER", "DB_PWD", "DB_NAME"):
    os.environ.pop(key, None)

import pytest
from fastapi.testclient import TestClient

import complaint_tracker.service.complaint.complaint as complaint_module
from complaint_tracker.db.session import Base, engine
from complaint_tracker.main import app


@pytest.fixture(autouse=True)
def fresh_tables():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


class FakeClock:
    """Each call moves one second forward so timestamps never tie by accident."""

    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


@pytest.fixture
def clock(monkeypatch):
    fake = FakeClock(datetime(2026, 1, 1, 9, 0, 0, tzinfo=timezone.utc))
    monkeypatch.setattr(complaint_module, "_now", fake)
    return fake


#scope : function < class < module < package < session
@pytest.fixture(scope="function")
def client():
    return TestClient(app)
