"""Domain models for the credit system."""

from credit_system.models.base import Address
from credit_system.models.credit import Credit
from credit_system.models.customer import Customer
from credit_system.models.enums import Status

__all__ = ["Address", "Credit", "Customer", "Status"]
