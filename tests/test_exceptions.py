"""Tests for custom exception hierarchy."""

from account_client.exceptions import (
    AccountClientError,
    ConfigurationError,
    ConnectivityError,
    DomainError,
    ProtocolError,
)
from account_client.soap import SoapFault


class TestExceptionHierarchy:
    """Test the exception inheritance chain."""

    def test_account_client_error_is_exception(self) -> None:
        """Test AccountClientError is an Exception."""
        assert isinstance(AccountClientError("test"), Exception)

    def test_configuration_error_is_account_client_error(self) -> None:
        """Test ConfigurationError derives from AccountClientError."""
        assert isinstance(ConfigurationError("test"), AccountClientError)

    def test_connectivity_error_is_account_client_error(self) -> None:
        """Test ConnectivityError derives from AccountClientError."""
        assert isinstance(ConnectivityError("test"), AccountClientError)

    def test_protocol_error_is_account_client_error(self) -> None:
        """Test ProtocolError derives from AccountClientError."""
        assert isinstance(ProtocolError("test"), AccountClientError)

    def test_soap_fault_is_domain_error(self) -> None:
        """Test SoapFault derives from DomainError."""
        err = SoapFault("S:Server", "boom")
        assert isinstance(err, DomainError)
        assert isinstance(err, AccountClientError)

    def test_protocol_error_field(self) -> None:
        """Test ProtocolError keeps the offending field."""
        err = ProtocolError("Unknown account type 'X'", field="type")
        assert err.field == "type"
        assert str(err) == "Unknown account type 'X'"

    def test_protocol_error_field_defaults_to_none(self) -> None:
        """Test ProtocolError.field defaults to None."""
        assert ProtocolError("bad envelope").field is None

    def test_soap_fault_message(self) -> None:
        """Test SoapFault message combines code and string."""
        err = SoapFault("S:Client", "Unknown operation")
        assert err.faultcode == "S:Client"
        assert err.faultstring == "Unknown operation"
        assert str(err) == "S:Client: Unknown operation"
