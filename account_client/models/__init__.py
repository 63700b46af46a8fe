"""Domain models for the account service."""

from account_client.models.account import Account
from account_client.models.enums import AccountType

__all__ = ["Account", "AccountType"]
