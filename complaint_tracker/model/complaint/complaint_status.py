import enum


class ComplaintStatus(str, enum.Enum):
    new = "new"
    in_progress = "in_progress"
    pending_user_info = "pending_user_info"
    resolved = "resolved"
    rejected = "rejected"


INITIAL_STATUS = ComplaintStatus.new


def can_transition(current: ComplaintStatus, target: ComplaintStatus) -> bool:
    """
    Status changes are at the admin's discretion: every status, including
    resolved and rejected, may move to any other status or to itself.
    """
    return current in ComplaintStatus and target in ComplaintStatus
