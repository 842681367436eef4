"""Populate a store with generated customers and credits."""

from datetime import date

from credit_system.config import CreditPolicyConfig
from credit_system.generators.credit import CreditDtoGenerator
from credit_system.generators.customer import CustomerDtoGenerator
from credit_system.logging import get_logger
from credit_system.services import CreditService, CustomerService
from credit_system.store import CreditDataStore

logger = get_logger(__name__)


def seed_store(
    store: CreditDataStore,
    num_customers: int,
    credits_per_customer: int,
    today: date,
    seed: int | None = None,
    policy: CreditPolicyConfig | None = None,
) -> dict[str, int]:
    """Register customers and request credits through the services.

    Generated requests are parsed by the same request models as API bodies.

    Parameters
    ----------
    store : CreditDataStore
        Store to populate.
    num_customers : int
        Number of customers to register.
    credits_per_customer : int
        Credits requested by each customer.
    today : date
        Reference date for first installment dates.
    seed : int | None
        Random seed for reproducibility.
    policy : CreditPolicyConfig | None
        Credit policy the generated requests must satisfy.

    Returns
    -------
    dict[str, int]
        Store summary after seeding.
    """
    policy = policy or CreditPolicyConfig()
    customer_service = CustomerService(store)
    credit_service = CreditService(store, customer_service)
    customer_gen = CustomerDtoGenerator(seed=seed)
    credit_gen = CreditDtoGenerator(seed=seed, policy=policy)

    for customer_dto in customer_gen.generate_batch(num_customers):
        customer = customer_service.save(customer_dto.to_entity())
        for credit_dto in credit_gen.generate_batch(customer.id, today, credits_per_customer):
            credit_service.save(credit_dto.to_entity())

    summary = store.summary()
    logger.info("Seeded store: %s", summary)
    return summary
