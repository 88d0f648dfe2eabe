"""Custom exception hierarchy for backoffice."""


class BackofficeError(Exception):
    """Base exception for all backoffice errors."""


class AccountNotFoundError(BackofficeError):
    """Raised when a referenced account does not exist."""


class DuplicateAccountError(BackofficeError):
    """Raised when an account id is already present in a store."""


class InvalidAccountError(BackofficeError):
    """Raised when a stored row cannot be turned into an account."""


class ConfigurationError(BackofficeError):
    """Raised when configuration is invalid or missing."""


class SinkError(BackofficeError):
    """Raised when a sink operation fails."""
