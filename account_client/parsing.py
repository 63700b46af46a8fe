"""Conversion of reply elements into Account values."""

import re
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Callable

from account_client.exceptions import ProtocolError
from account_client.models import Account, AccountType
from account_client.soap import SoapObject

DEFAULT_BALANCE = Decimal("0.0")

# Day-granularity prefix; any trailing time/offset component is ignored.
_DATE_RE = re.compile(r"^(?P<y>\d{4})-(?P<m>\d{2})-(?P<d>\d{2})")
_INT_RE = re.compile(r"^[+-]?\d+$")


def parse_id(text: str | None) -> int | None:
    """Parse an account id; absent or non-integer values yield ``None``."""
    if text is None:
        return None
    s = text.strip()
    return int(s) if _INT_RE.match(s) else None


def parse_balance(text: str | None) -> Decimal:
    """Parse a balance; absent or non-numeric values yield ``0.0``."""
    if text is None:
        return DEFAULT_BALANCE
    try:
        value = Decimal(text.strip())
    except InvalidOperation:
        return DEFAULT_BALANCE
    return value if value.is_finite() else DEFAULT_BALANCE


def parse_creation_date(text: str | None, clock: Callable[[], date] = date.today) -> date:
    """Parse a ``YYYY-MM-DD`` creation date.

    Parameters
    ----------
    text : str | None
        Raw field value.
    clock : Callable[[], date]
        Supplies the fallback used when the value is absent or unparseable.

    Returns
    -------
    date
        Parsed date, or ``clock()``.
    """
    if text is None:
        return clock()
    m = _DATE_RE.match(text.strip())
    if not m:
        return clock()
    try:
        return date(int(m["y"]), int(m["m"]), int(m["d"]))
    except ValueError:
        return clock()


def parse_account(element: Any, clock: Callable[[], date] = date.today) -> Account:
    """Build an Account from one ``getComptes`` reply element."""
    if not isinstance(element, SoapObject):
        raise ProtocolError("Reply element is not a structure")

    return Account(
        id=parse_id(element.get_property_as_string("id")),
        balance=parse_balance(element.get_property_as_string("solde")),
        created_at=parse_creation_date(element.get_property_as_string("dateCreation"), clock),
        account_type=AccountType.from_wire(element.get_property_as_string("type")),
    )


def parse_accounts(payload: SoapObject, clock: Callable[[], date] = date.today) -> list[Account]:
    """Build Accounts from every element of a ``getComptes`` reply, in order.

    A failing element aborts the whole read; the error names the element index.
    """
    accounts = []
    for index, element in enumerate(payload):
        try:
            accounts.append(parse_account(element, clock))
        except ProtocolError as e:
            raise ProtocolError(f"Account #{index}: {e}", field=e.field) from e
    return accounts


_TRUE = ("true", "1")
_FALSE = ("false", "0")


def parse_boolean(value: Any) -> bool:
    """Interpret an RPC return value as a boolean literal."""
    if isinstance(value, str):
        s = value.strip().lower()
        if s in _TRUE:
            return True
        if s in _FALSE:
            return False
    raise ProtocolError(f"Expected a boolean reply, got {value!r}", field="return")
