class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or a required selection is missing."""


class NotFoundError(DomainError):
    """Raised when an update or delete targets an id that does not exist."""


class AdmissionError(DomainError):
    """Base class for refused check-ins."""


class ClearanceExpiredError(AdmissionError):
    """Raised when the resident's medical clearance has expired."""


class DuplicateCheckInError(AdmissionError):
    """Raised when the resident already checked in on the same calendar day."""


class StoreError(Exception):
    """Raised when the storage backend fails; the operation is aborted."""
