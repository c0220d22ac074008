from .contact_record import ContactRecord
from .company_info import CompanyInfo
from .lookup_outcome import LookupOutcome
from .resolution import Found, NotFound, NOT_FOUND, ResolutionResult

__all__ = [
    "ContactRecord",
    "CompanyInfo",
    "LookupOutcome",
    "Found",
    "NotFound",
    "NOT_FOUND",
    "ResolutionResult",
]
