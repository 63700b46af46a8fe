"""Enumeration types for account entities."""

from enum import Enum

from account_client.exceptions import ProtocolError


class AccountType(str, Enum):
    """Account category.

    Values are the names the service uses on the wire.
    """

    CHECKING = "COURANT"
    SAVINGS = "EPARGNE"

    @classmethod
    def from_wire(cls, text: str | None) -> "AccountType":
        """Match a reply value exactly against the wire names."""
        if text is None:
            raise ProtocolError("Account type is missing", field="type")
        for member in cls:
            if member.value == text:
                return member
        raise ProtocolError(f"Unknown account type {text!r}", field="type")

    @classmethod
    def parse(cls, text: str) -> "AccountType":
        """Parse user input, accepting either member names or wire names."""
        key = text.strip().upper()
        if key in cls.__members__:
            return cls[key]
        return cls.from_wire(key)
