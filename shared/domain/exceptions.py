"""
Domain exceptions.
"""


class DomainError(Exception):
    """
    Raised when an entity or value object invariant is violated.

    Domain errors know nothing about HTTP; the interface layer renders them
    as 400 responses.
    """

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)
