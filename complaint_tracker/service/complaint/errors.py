class ComplaintError(Exception):
    """Base class for failures raised by the complaint repository."""


class ValidationError(ComplaintError):
    """Input was rejected before the store was touched."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class NotFoundError(ComplaintError):
    def __init__(self, complaint_id: int):
        super().__init__(f"Complaint with ID {complaint_id} not found")
        self.complaint_id = complaint_id


class StorageError(ComplaintError):
    """The store failed; the transaction was rolled back."""
