"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class EmptyCustomerNameError(ValidationError):
    """Checkout was attempted without a customer name."""


class InsufficientStockError(ValidationError):
    """A cart quantity exceeds the stock on hand (strict stock mode only)."""


class StorageCorruptError(DomainException):
    """A persisted blob could not be parsed.

    Returned inside a ``LoadResult`` rather than raised, so callers can
    fall back to the seed/empty state and warn the user.
    """

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"Stored '{key}' data is unreadable: {reason}")
        self.key = key
        self.reason = reason
