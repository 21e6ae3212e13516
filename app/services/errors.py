"""Service layer errors, translated to HTTP responses in main.py."""


class ServiceError(Exception):
    """Base exception for service layer errors."""

    status_code = 500

    def __init__(self, message: str, code: str = "SERVICE_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(message)


class ConflictError(ServiceError):
    """Raised when a write collides with existing data."""

    status_code = 409

    def __init__(self, message: str) -> None:
        super().__init__(message, code="CONFLICT")


class UnauthorizedError(ServiceError):
    """Raised when credentials cannot be verified."""

    status_code = 401

    def __init__(self, message: str = "Check your credentials") -> None:
        super().__init__(message, code="UNAUTHORIZED")


class NotFoundError(ServiceError):
    """Raised when an entity is absent or owned by someone else."""

    status_code = 404

    def __init__(self, entity_type: str) -> None:
        super().__init__(f"{entity_type} not found", code="NOT_FOUND")


class InternalError(ServiceError):
    """Raised for unexpected persistence or hashing failures."""

    status_code = 500

    def __init__(self) -> None:
        super().__init__("Internal server error", code="INTERNAL")
