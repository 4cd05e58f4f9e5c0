from .complaint import Complaint

__all__ = ["Complaint"]
