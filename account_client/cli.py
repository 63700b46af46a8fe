"""Command-line interface for the account service."""

import argparse
import sys
from decimal import Decimal, InvalidOperation
from typing import Callable, TextIO

from account_client.client import RemoteAccountClient
from account_client.config import LOG_FORMATS, ClientConfig, ServiceConfig
from account_client.exceptions import AccountClientError, ConfigurationError
from account_client.logging import get_logger, setup_logging
from account_client.models import Account, AccountType

logger = get_logger(__name__)

TYPE_CHOICES = [t.name for t in AccountType] + [t.value for t in AccountType]


def _decimal(text: str) -> Decimal:
    try:
        return Decimal(text)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid amount: {text!r}") from None


def format_account(account: Account) -> str:
    """Render one account as a fixed-width line."""
    account_id = "-" if account.id is None else str(account.id)
    return (
        f"{account_id:>6}  {account.account_type.name:<8}  "
        f"{account.balance:>14}  {account.created_at.isoformat()}"
    )


def print_accounts(client: RemoteAccountClient, out: TextIO) -> int:
    """Re-fetch and print every account. Returns the exit status."""
    try:
        accounts = client.list_accounts()
    except AccountClientError as e:
        print(f"Could not load accounts: {e}", file=out)
        return 1

    for account in accounts:
        print(format_account(account), file=out)
    print(f"{len(accounts)} account(s)", file=out)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="List, create and delete accounts on the remote SOAP service"
    )
    parser.add_argument("--url", type=str, default=None, help="Service URL (overrides ACCOUNT_SERVICE_URL)")
    parser.add_argument(
        "--namespace",
        type=str,
        default=None,
        help="Service namespace (overrides ACCOUNT_SERVICE_NAMESPACE)",
    )
    parser.add_argument("--log-level", type=str, default=None, help="Log level (default: LOG_LEVEL or INFO)")
    parser.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        default=None,
        help="Log format (default: LOG_FORMAT or standard)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List all accounts")

    create = subparsers.add_parser("create", help="Create an account")
    create.add_argument("--balance", type=_decimal, required=True, help="Initial balance")
    create.add_argument(
        "--type",
        dest="account_type",
        type=str.upper,
        choices=TYPE_CHOICES,
        required=True,
        help="Account type",
    )

    delete = subparsers.add_parser("delete", help="Delete an account")
    delete.add_argument("account_id", type=int, help="Id of the account to delete")
    delete.add_argument("--yes", action="store_true", help="Do not ask for confirmation")

    return parser


def _load_config(args: argparse.Namespace) -> ClientConfig:
    config = ClientConfig.from_env()
    return ClientConfig(
        service=ServiceConfig(
            url=args.url or config.service.url,
            namespace=args.namespace or config.service.namespace,
        ),
        log_level=args.log_level or config.log_level,
        log_format=args.log_format or config.log_format,
    )


def main(
    argv: list[str] | None = None,
    client: RemoteAccountClient | None = None,
    out: TextIO | None = None,
    confirm: Callable[[str], str] = input,
) -> int:
    """Main entry point."""
    out = out or sys.stdout
    args = build_parser().parse_args(argv)

    try:
        config = _load_config(args)
    except ConfigurationError as e:
        print(f"Invalid configuration: {e}", file=out)
        return 1

    setup_logging(config.log_level, config.log_format)
    client = client or RemoteAccountClient(config.service)
    logger.debug("Running %s against %s", args.command, config.service.url)

    if args.command == "list":
        return print_accounts(client, out)

    if args.command == "create":
        account_type = AccountType.parse(args.account_type)
        if not client.create_account(args.balance, account_type):
            print("Account could not be created.", file=out)
            return 1
        print("Account created.", file=out)
        return print_accounts(client, out)

    if not args.yes:
        answer = confirm(f"Delete account {args.account_id}? [y/N] ")
        if answer.strip().lower() not in ("y", "yes"):
            print("Cancelled.", file=out)
            return 0

    if not client.delete_account(args.account_id):
        print("Account could not be deleted.", file=out)
        return 1
    print("Account deleted.", file=out)
    return print_accounts(client, out)


if __name__ == "__main__":
    sys.exit(main())
