"""Business services for customers and credits."""

from credit_system.services.credit import CreditService
from credit_system.services.customer import CustomerService

__all__ = ["CreditService", "CustomerService"]
