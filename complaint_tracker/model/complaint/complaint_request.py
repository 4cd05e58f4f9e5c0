from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator

from complaint_tracker.model.complaint.complaint_status import ComplaintStatus


def check_email_syntax(value: str) -> str:
    """
    Reject malformed addresses but hand back the value exactly as typed:
    lookups are case-sensitive, so the stored key must not be normalized.
    """
    try:
        validate_email(
            value, check_deliverability=False, globally_deliverable=False, test_environment=True
        )
    except EmailNotValidError as exc:
        raise ValueError("Valid email is required") from exc
    return value


class ComplaintCreateRequest(BaseModel):
    # Unknown keys (a "status" in particular) are dropped; new complaints always start as "new".
    model_config = ConfigDict(extra="ignore")

    title: str = Field(..., min_length=1, description="Short summary of the problem")
    description: str = Field(..., min_length=1, description="Full description of the problem")
    customer_email: str = Field(..., description="Email used to look the complaint up later")

    @field_validator("customer_email")
    @classmethod
    def _email(cls, value: str) -> str:
        return check_email_syntax(value)


class ComplaintStatusUpdateRequest(BaseModel):
    status: ComplaintStatus


class ComplaintEmailQuery(BaseModel):
    customer_email: str

    @field_validator("customer_email")
    @classmethod
    def _email(cls, value: str) -> str:
        return check_email_syntax(value)
