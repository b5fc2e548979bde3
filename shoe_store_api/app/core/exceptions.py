"""Error types raised inside the service layer.

Services convert these into ``Err`` results at their boundary, so
callers of a service operation never see them raised.
"""


class ServiceError(Exception):
    """Base class for all expected service failures."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ValidationError(ServiceError):
    """Raised when caller input breaks a record invariant."""
    pass


class NotFoundError(ServiceError):
    """Raised when an operation references an id absent from the map."""

    def __init__(self, shoe_id: str, message: str = None):
        self.shoe_id = shoe_id
        super().__init__(message or f"A shoe with id={shoe_id} not found")


class StorageError(ServiceError):
    """Raised when the durable map refuses an entry."""
    pass
