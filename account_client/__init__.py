"""SOAP client for the remote bank-account service."""

from account_client.client import RemoteAccountClient
from account_client.config import ClientConfig, ServiceConfig
from account_client.exceptions import (
    AccountClientError,
    ConfigurationError,
    ConnectivityError,
    DomainError,
    ProtocolError,
)
from account_client.models import Account, AccountType
from account_client.result import Err, ErrorKind, Ok

__all__ = [
    "Account",
    "AccountClientError",
    "AccountType",
    "ClientConfig",
    "ConfigurationError",
    "ConnectivityError",
    "DomainError",
    "Err",
    "ErrorKind",
    "Ok",
    "ProtocolError",
    "RemoteAccountClient",
    "ServiceConfig",
]
