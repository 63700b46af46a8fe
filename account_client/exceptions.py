"""Custom exception hierarchy for account-client."""


class AccountClientError(Exception):
    """Base exception for all account-client errors."""


class ConfigurationError(AccountClientError):
    """Raised when configuration is invalid or missing."""


class ConnectivityError(AccountClientError):
    """Raised when the service endpoint cannot be reached."""


class ProtocolError(AccountClientError):
    """Raised when a reply cannot be decoded.

    Parameters
    ----------
    message : str
        Human readable description.
    field : str | None
        Name of the offending reply field, when one can be identified.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class DomainError(AccountClientError):
    """Raised when the service rejects a request."""
