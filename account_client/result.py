"""Tagged result values for service calls."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from account_client.exceptions import (
    AccountClientError,
    ConnectivityError,
    DomainError,
    ProtocolError,
)

T = TypeVar("T")


class ErrorKind(str, Enum):
    CONNECTIVITY = "CONNECTIVITY"
    PROTOCOL = "PROTOCOL"
    DOMAIN = "DOMAIN"

    @classmethod
    def of(cls, error: AccountClientError) -> "ErrorKind":
        """Classify an error raised by a service call."""
        if isinstance(error, ConnectivityError):
            return cls.CONNECTIVITY
        if isinstance(error, DomainError):
            return cls.DOMAIN
        if isinstance(error, ProtocolError):
            return cls.PROTOCOL
        raise TypeError(f"Unclassified error type {type(error).__name__}")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful call."""

    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed call, tagged with the failure kind."""

    kind: ErrorKind
    error: AccountClientError

    @property
    def ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return str(self.error)

    def unwrap(self):
        raise self.error

    @classmethod
    def from_error(cls, error: AccountClientError) -> "Err":
        return cls(ErrorKind.of(error), error)


Result = Ok[T] | Err
