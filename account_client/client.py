"""Client for the remote account service."""

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Callable

from account_client.config import ServiceConfig
from account_client.exceptions import AccountClientError, DomainError, ProtocolError
from account_client.logging import get_logger
from account_client.models import Account, AccountType
from account_client.parsing import parse_accounts, parse_boolean
from account_client.result import Err, Ok, Result
from account_client.soap import SoapObject, soap_decode, soap_encode
from account_client.transport import HttpTransport

logger = get_logger(__name__)

METHOD_GET_ACCOUNTS = "getComptes"
METHOD_CREATE_ACCOUNT = "createCompte"
METHOD_DELETE_ACCOUNT = "deleteCompte"


def to_amount(balance: Decimal | float | int | str) -> Decimal:
    """Convert a balance to the finite decimal sent as ``solde``."""
    try:
        amount = Decimal(str(balance).strip())
    except InvalidOperation:
        raise ProtocolError(f"Invalid balance {balance!r}", field="solde") from None
    if not amount.is_finite():
        raise ProtocolError(f"Balance must be finite, got {balance!r}", field="solde")
    return amount


class RemoteAccountClient:
    """List, create and delete accounts through the SOAP service.

    Every operation is a single blocking request/response round trip; the
    client keeps no state between calls.

    Each operation comes in two forms. The ``*_result`` methods return an
    ``Ok`` or an ``Err`` tagged with the failure kind and never raise
    ``AccountClientError``. The plain methods keep the simple signatures UI
    code expects: ``list_accounts`` raises typed errors so that an empty list
    only ever means "no accounts", while ``create_account`` and
    ``delete_account`` collapse every failure to ``False``.
    """

    def __init__(
        self,
        config: ServiceConfig | None = None,
        transport: HttpTransport | None = None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the client.

        Parameters
        ----------
        config : ServiceConfig | None
            Endpoint and namespace; defaults to the built-in service address.
        transport : HttpTransport | None
            Transport to send envelopes with; defaults to one bound to
            ``config.url``.
        clock : Callable[[], date]
            Source of the creation date used when a reply omits it.
        """
        self.config = config or ServiceConfig()
        self.transport = transport or HttpTransport(self.config.url)
        self.clock = clock

    def _invoke(self, method: str, params: dict[str, Any] | None = None) -> SoapObject:
        envelope = soap_encode(method, params, namespace=self.config.namespace)
        logger.debug("Calling %s at %s", method, self.config.url)
        body = self.transport.call("", envelope)
        return soap_decode(body)

    @staticmethod
    def _failed(method: str, error: AccountClientError) -> Err:
        result = Err.from_error(error)
        logger.warning(
            "%s failed: %s",
            method,
            error,
            extra={"extra": {"operation": method, "error_kind": result.kind.value}},
        )
        return result

    # MARK: - Result API

    def list_accounts_result(self) -> Result[list[Account]]:
        try:
            payload = self._invoke(METHOD_GET_ACCOUNTS)
            accounts = parse_accounts(payload, self.clock)
        except AccountClientError as e:
            return self._failed(METHOD_GET_ACCOUNTS, e)

        logger.info(
            "Fetched %d accounts",
            len(accounts),
            extra={"extra": {"operation": METHOD_GET_ACCOUNTS, "count": len(accounts)}},
        )
        return Ok(accounts)

    def create_account_result(
        self, balance: Decimal | float | int | str, account_type: AccountType
    ) -> Result[None]:
        try:
            params = {"solde": to_amount(balance), "type": account_type.value}
            self._invoke(METHOD_CREATE_ACCOUNT, params)
        except AccountClientError as e:
            return self._failed(METHOD_CREATE_ACCOUNT, e)

        logger.info("Created %s account with balance %s", account_type.name, params["solde"])
        return Ok(None)

    def delete_account_result(self, account_id: int) -> Result[None]:
        """Delete one account.

        A ``false`` reply means the service refused the deletion, typically
        because the id does not exist, and is reported as a domain error.
        """
        try:
            payload = self._invoke(METHOD_DELETE_ACCOUNT, {"id": int(account_id)})
            deleted = parse_boolean(payload.response)
            if not deleted:
                raise DomainError(f"Service refused to delete account {account_id}")
        except AccountClientError as e:
            return self._failed(METHOD_DELETE_ACCOUNT, e)

        logger.info("Deleted account %d", account_id)
        return Ok(None)

    # MARK: - Boundary API

    def list_accounts(self) -> list[Account]:
        """Fetch every account, in server order.

        Raises
        ------
        ConnectivityError
            If the service cannot be reached.
        ProtocolError
            If the reply or one of its elements cannot be decoded.
        DomainError
            If the service answers with a fault.
        """
        return self.list_accounts_result().unwrap()

    def create_account(self, balance: Decimal | float | int | str, account_type: AccountType) -> bool:
        """Create an account; the server assigns its id and creation date."""
        return self.create_account_result(balance, account_type).ok

    def delete_account(self, account_id: int) -> bool:
        return self.delete_account_result(account_id).ok
