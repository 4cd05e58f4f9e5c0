from datetime import datetime

from pydantic import BaseModel, ConfigDict

from complaint_tracker.model.complaint.complaint_status import ComplaintStatus


class ComplaintResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    customer_email: str
    status: ComplaintStatus
    created_at: datetime
    updated_at: datetime


class ComplaintStatsResponse(BaseModel):
    total: int
    new: int
    in_progress: int
    pending_user_info: int
    resolved: int
    rejected: int


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
