"""Configuration management for account-client."""

import os
from dataclasses import dataclass, field

from account_client.exceptions import ConfigurationError

DEFAULT_URL = "http://10.0.2.2:8082/services/ws"
DEFAULT_NAMESPACE = "http://ws.soapAcount/"
LOG_FORMATS = ("standard", "json")


@dataclass
class ServiceConfig:
    """Remote account service endpoint."""

    url: str = DEFAULT_URL
    namespace: str = DEFAULT_NAMESPACE

    def __post_init__(self) -> None:
        if not self.url:
            raise ConfigurationError("Service URL must not be empty")
        if not self.namespace:
            raise ConfigurationError("Service namespace must not be empty")


@dataclass
class ClientConfig:
    """Main configuration for account-client."""

    service: ServiceConfig = field(default_factory=ServiceConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    def __post_init__(self) -> None:
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"Unknown log format {self.log_format!r}, expected one of {LOG_FORMATS}"
            )

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Create config from environment variables."""
        service = ServiceConfig(
            url=os.getenv("ACCOUNT_SERVICE_URL", DEFAULT_URL),
            namespace=os.getenv("ACCOUNT_SERVICE_NAMESPACE", DEFAULT_NAMESPACE),
        )

        return cls(
            service=service,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard").lower(),
        )
