"""Sample request generators for seeding and tests."""

from credit_system.generators.credit import CreditDtoGenerator
from credit_system.generators.customer import CustomerDtoGenerator
from credit_system.generators.seed import seed_store

__all__ = ["CreditDtoGenerator", "CustomerDtoGenerator", "seed_store"]
