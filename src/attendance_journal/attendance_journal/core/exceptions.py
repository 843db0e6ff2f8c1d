class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""


class InvalidPairCodeError(ValidationError):
    """Raised when a pair code does not belong to any lesson instance."""


class NotFoundError(DomainError):
    """Raised when an endpoint treats an empty result as an error."""


class ConflictError(DomainError):
    """Raised on a duplicate unique key (e.g. registering an existing email)."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class InternalError(DomainError):
    """Raised when the store or a transaction fails."""
