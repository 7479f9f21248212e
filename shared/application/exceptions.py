"""
Application exceptions carrying an error code and an HTTP status.
"""


class ApplicationError(Exception):
    """Raised by use cases when a request cannot be fulfilled."""

    def __init__(self, message: str, code: str, status_code: int = 500):
        self.message = message
        self.code = code
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(ApplicationError):
    """Raised when a requested resource does not exist."""

    def __init__(self, resource: str, identifier: str):
        super().__init__(
            message=f"{resource} with identifier '{identifier}' not found",
            code="NOT_FOUND",
            status_code=404,
        )
        self.resource = resource
        self.identifier = identifier
