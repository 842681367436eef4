"""Custom exception hierarchy for credit-system."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from credit_system.validation import Violation


class CreditSystemError(Exception):
    """Base exception for all credit-system errors."""


class NotFoundError(CreditSystemError):
    """Raised when a referenced customer does not exist."""


class BusinessError(CreditSystemError):
    """Raised when a business rule rejects the operation."""


class ConflictError(CreditSystemError):
    """Raised when a uniqueness constraint is violated."""


class ConfigurationError(CreditSystemError):
    """Raised when configuration is invalid or missing."""


class ValidationError(CreditSystemError):
    """Raised when a transfer object violates one or more constraints.

    Parameters
    ----------
    violations : list[Violation]
        Every violated field with its message, in rule order.
    """

    def __init__(self, violations: list[Violation]) -> None:
        self.violations = list(violations)
        summary = "; ".join(f"{v.field}: {v.message}" for v in self.violations)
        super().__init__(f"Invalid request: {summary}")

    def as_details(self) -> dict[str, str]:
        """Return violations as a field -> message mapping."""
        return {v.field: v.message for v in self.violations}
