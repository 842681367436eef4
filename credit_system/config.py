"""Configuration management for credit-system."""

from dataclasses import dataclass, field

from credit_system import __version__
from credit_system.exceptions import ConfigurationError


@dataclass
class ApiConfig:
    """HTTP server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080
    title: str = "Credit Application System"
    version: str = __version__

    @property
    def base_url(self) -> str:
        """Get base URL."""
        return f"http://{self.host}:{self.port}"


@dataclass
class CreditPolicyConfig:
    """Bounds applied when validating credit requests."""

    min_installments: int = 1
    max_installments: int = 48
    max_first_installment_months: int = 3

    def __post_init__(self) -> None:
        if self.min_installments < 1:
            raise ConfigurationError("min_installments must be at least 1")
        if self.max_installments < self.min_installments:
            raise ConfigurationError(
                f"max_installments ({self.max_installments}) is lower than "
                f"min_installments ({self.min_installments})"
            )
        if self.max_first_installment_months < 1:
            raise ConfigurationError("max_first_installment_months must be at least 1")


@dataclass
class AppConfig:
    """Main configuration for credit-system."""

    api: ApiConfig = field(default_factory=ApiConfig)
    policy: CreditPolicyConfig = field(default_factory=CreditPolicyConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create config from environment variables."""
        import os

        try:
            api = ApiConfig(
                host=os.getenv("API_HOST", "127.0.0.1"),
                port=int(os.getenv("API_PORT", "8080")),
            )
            policy = CreditPolicyConfig(
                min_installments=int(os.getenv("MIN_INSTALLMENTS", "1")),
                max_installments=int(os.getenv("MAX_INSTALLMENTS", "48")),
                max_first_installment_months=int(os.getenv("MAX_FIRST_INSTALLMENT_MONTHS", "3")),
            )
        except ValueError as e:
            raise ConfigurationError(f"Invalid numeric setting: {e}") from e

        log_format = os.getenv("LOG_FORMAT", "standard")
        if log_format not in ("standard", "json"):
            raise ConfigurationError(f"Unknown LOG_FORMAT {log_format!r}")

        return cls(
            api=api,
            policy=policy,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=log_format,
        )
