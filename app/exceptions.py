class ServiceError(Exception):
    """Base class for errors surfaced by the resource services."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ServiceError):
    """Raised when an operation targets an id or unique key that is not stored."""

    status_code = 404

    def __init__(self, entity: str, key: str, value):
        super().__init__(f"{entity} not found with {key}: {value}")
        self.entity = entity
        self.key = key
        self.value = value


class ConflictError(ServiceError):
    """Raised when a write violates a uniqueness constraint of the store."""

    status_code = 409
