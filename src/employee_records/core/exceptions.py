class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""


class NotFoundError(DomainError):
    """Raised when the referenced employee does not exist."""


class StoreError(DomainError):
    """Raised when the underlying document store fails.

    The message is generic; the original exception is chained as ``__cause__``.
    """
