"""Tests for domain models."""

import dataclasses
from datetime import date
from decimal import Decimal

import pytest

from account_client.exceptions import ProtocolError
from account_client.models import Account, AccountType


class TestAccountType:
    """Tests for AccountType."""

    def test_wire_values(self) -> None:
        """Test members carry the service wire names."""
        assert AccountType.CHECKING.value == "COURANT"
        assert AccountType.SAVINGS.value == "EPARGNE"

    def test_closed_set(self) -> None:
        """Test AccountType has exactly two members."""
        assert list(AccountType) == [AccountType.CHECKING, AccountType.SAVINGS]

    def test_from_wire_exact_match(self) -> None:
        """Test from_wire accepts the exact wire names."""
        assert AccountType.from_wire("COURANT") is AccountType.CHECKING
        assert AccountType.from_wire("EPARGNE") is AccountType.SAVINGS

    @pytest.mark.parametrize("text", ["courant", " EPARGNE", "CHECKING", "SAVINGS", ""])
    def test_from_wire_rejects_anything_else(self, text: str) -> None:
        """Test from_wire rejects member names and unknown strings."""
        with pytest.raises(ProtocolError) as exc_info:
            AccountType.from_wire(text)
        assert exc_info.value.field == "type"

    def test_from_wire_missing(self) -> None:
        """Test from_wire rejects a missing value."""
        with pytest.raises(ProtocolError, match="missing"):
            AccountType.from_wire(None)

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("CHECKING", AccountType.CHECKING),
            ("savings", AccountType.SAVINGS),
            ("courant", AccountType.CHECKING),
            (" EPARGNE ", AccountType.SAVINGS),
        ],
    )
    def test_parse_accepts_names_and_wire_values(self, text: str, expected: AccountType) -> None:
        """Test parse accepts member names and wire values."""
        assert AccountType.parse(text) is expected

    def test_parse_rejects_unknown(self) -> None:
        """Test parse rejects unknown account types."""
        with pytest.raises(ProtocolError):
            AccountType.parse("INVESTMENT")


class TestAccount:
    """Tests for Account model."""

    def test_account_creation(self) -> None:
        """Test creating an account with all fields."""
        account = Account(
            id=7,
            balance=Decimal("1500.25"),
            created_at=date(2025, 1, 15),
            account_type=AccountType.SAVINGS,
        )

        assert account.id == 7
        assert account.balance == Decimal("1500.25")
        assert account.created_at == date(2025, 1, 15)
        assert account.account_type == AccountType.SAVINGS
        assert account.is_persisted is True

    def test_account_without_id(self) -> None:
        """Test an account without id is not persisted."""
        account = Account(None, Decimal("0"), date(2025, 1, 1), AccountType.CHECKING)
        assert account.is_persisted is False

    def test_account_is_immutable(self) -> None:
        """Test accounts cannot be mutated in place."""
        account = Account(1, Decimal("10"), date(2025, 1, 1), AccountType.CHECKING)
        with pytest.raises(dataclasses.FrozenInstanceError):
            account.balance = Decimal("20")  # type: ignore[misc]

    def test_accounts_compare_by_value(self) -> None:
        """Test accounts with equal fields are equal."""
        a = Account(1, Decimal("10.0"), date(2025, 1, 1), AccountType.CHECKING)
        b = Account(1, Decimal("10.00"), date(2025, 1, 1), AccountType.CHECKING)
        assert a == b
