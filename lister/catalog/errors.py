"""Domain errors raised by catalog operations.

Both carry a short human-readable message that is returned to the caller.
"""


class CatalogNotFoundError(LookupError):
    """Raised when a referenced application, environment, or metadata key does not exist."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CatalogBadRequestError(ValueError):
    """Raised when a required request parameter is missing or unusable."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
