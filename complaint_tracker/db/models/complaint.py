from sqlalchemy import Column, DateTime, Enum, Integer, String, Text

from complaint_tracker.db.session import Base
from complaint_tracker.model.complaint.complaint_status import INITIAL_STATUS, ComplaintStatus


class Complaint(Base):
    __tablename__ = "complaints"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    # Customer lookup key; compared exactly as submitted
    customer_email = Column(String(320), nullable=False, index=True)
    # new | in_progress | pending_user_info | resolved | rejected
    status = Column(
        Enum(
            ComplaintStatus,
            name="complaint_status",
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        default=INITIAL_STATUS,
        nullable=False,
    )
    # Both timestamps are assigned by the repository, not by the database
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
