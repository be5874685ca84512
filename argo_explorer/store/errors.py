"""
Argo Explorer Store Errors

Every error raised by the in-memory store derives from ``StoreError``.
Route handlers translate these into HTTP status codes; the store itself
never knows about HTTP.

    ValidationError         - malformed input (400)
    DuplicateFloatError     - float code already registered (409)
    DanglingReferenceError  - measurement points at an unknown float (400)
    NotFoundError           - lookup miss where a record is required (404)
"""


class StoreError(Exception):
    """Base class for all store errors."""


class ValidationError(StoreError, ValueError):
    """Input failed validation (bad range, bad enum value, blank text)."""


class DuplicateFloatError(ValidationError):
    """A float with the same external code already exists."""

    def __init__(self, float_id: str):
        self.float_id = float_id
        super().__init__(f"Float already exists: '{float_id}'")


class DanglingReferenceError(StoreError, LookupError):
    """A record references a float that is not in the store."""

    def __init__(self, float_id: str):
        self.float_id = float_id
        super().__init__(f"Unknown float referenced: '{float_id}'")


class NotFoundError(StoreError, LookupError):
    """A required record does not exist."""
