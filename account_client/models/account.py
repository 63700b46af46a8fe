"""Account model."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from account_client.models.enums import AccountType


@dataclass(frozen=True)
class Account:
    """Bank account as reported by the service.

    The id is assigned by the server on creation and is ``None`` only for
    accounts that have not been persisted yet.
    """

    id: int | None
    balance: Decimal
    created_at: date
    account_type: AccountType

    @property
    def is_persisted(self) -> bool:
        return self.id is not None
