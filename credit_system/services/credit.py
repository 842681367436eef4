"""Credit service."""

import uuid
from datetime import date

from credit_system.exceptions import BusinessError
from credit_system.logging import get_logger
from credit_system.models import Credit
from credit_system.services.customer import CustomerService
from credit_system.store import CreditDataStore
from credit_system.validation import add_months

logger = get_logger(__name__)


class CreditService:
    """Create and query credits on behalf of a customer."""

    def __init__(self, store: CreditDataStore, customer_service: CustomerService) -> None:
        self.store = store
        self.customer_service = customer_service

    def save(self, credit: Credit) -> Credit:
        """Persist a credit after resolving its customer.

        Parameters
        ----------
        credit : Credit
            New credit; ``customer_id`` must reference an existing customer.

        Returns
        -------
        Credit
            The persisted credit with its customer relation loaded.

        Raises
        ------
        NotFoundError
            If the customer does not exist.
        """
        credit.customer = self.customer_service.find_by_id(credit.customer_id)
        saved = self.store.add_credit(credit)
        logger.info("Credit %s saved for customer %s", saved.credit_code, saved.customer_id)
        return saved

    def find_all_by_customer(self, customer_id: int) -> list[Credit]:
        return self.store.get_customer_credits(customer_id)

    def find_by_credit_code(self, customer_id: int, credit_code: uuid.UUID) -> Credit:
        """Get a credit by code, scoped to its owner.

        Existence is checked before ownership and each failure carries its
        own message.

        Raises
        ------
        BusinessError
            If no credit has this code, or it belongs to another customer.
        """
        credit = self.store.get_credit_by_code(credit_code)
        if credit is None:
            logger.warning("Credit code %s not found", credit_code)
            raise BusinessError(f"Creditcode {credit_code} not found")
        if credit.customer_id != customer_id:
            logger.warning(
                "Credit %s requested by customer %s but owned by %s",
                credit_code,
                customer_id,
                credit.customer_id,
            )
            raise BusinessError(
                f"Creditcode {credit_code} does not belong to customer {customer_id}"
            )
        credit.customer = self.store.get_customer(credit.customer_id)
        return credit

    def installment_schedule(self, customer_id: int, credit_code: uuid.UUID) -> list[date]:
        """Due date of every installment, one month apart from the first."""
        credit = self.find_by_credit_code(customer_id, credit_code)
        return [
            add_months(credit.day_first_of_installment, n)
            for n in range(credit.number_of_installments)
        ]
