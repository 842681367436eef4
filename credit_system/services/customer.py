"""Customer service."""

from credit_system.exceptions import NotFoundError
from credit_system.logging import get_logger
from credit_system.models import Customer
from credit_system.store import CreditDataStore

logger = get_logger(__name__)


class CustomerService:
    """Create, find, update and delete customers."""

    def __init__(self, store: CreditDataStore) -> None:
        self.store = store

    def save(self, customer: Customer) -> Customer:
        saved = self.store.add_customer(customer)
        logger.info("Customer %s saved", saved.id)
        return saved

    def find_by_id(self, customer_id: int) -> Customer:
        """Get a customer by id.

        Raises
        ------
        NotFoundError
            If no customer has this id.
        """
        customer = self.store.get_customer(customer_id)
        if customer is None:
            logger.warning("Customer %s not found", customer_id)
            raise NotFoundError(f"Id {customer_id} not found")
        return customer

    def update(self, customer: Customer) -> Customer:
        return self.store.update_customer(customer)

    def delete(self, customer_id: int) -> None:
        """Delete a customer; its credits go with it."""
        customer = self.find_by_id(customer_id)
        self.store.delete_customer(customer.id)
        logger.info("Customer %s deleted", customer_id)
