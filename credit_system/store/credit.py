"""In-memory credit data store with uniqueness and ownership tracking."""

import copy
import threading
import uuid
from dataclasses import dataclass, field, replace

from credit_system.exceptions import ConflictError, NotFoundError
from credit_system.logging import get_logger
from credit_system.models import Credit, Customer

logger = get_logger(__name__)


@dataclass
class CreditDataStore:
    """In-memory store for customers and credits.

    Entities are copied on the way in and on the way out, so callers never
    share mutable state with the store. A credit's loaded ``customer``
    relation is dropped before storing. Reads and writes run under one
    lock, so a read never sees a half-applied delete, and of two
    conflicting writes the second raises :class:`ConflictError`.
    """

    customers: dict[int, Customer] = field(default_factory=dict)
    credits: dict[int, Credit] = field(default_factory=dict)

    # Uniqueness indexes
    _cpf_index: dict[str, int] = field(default_factory=dict)
    _email_index: dict[str, int] = field(default_factory=dict)
    _code_index: dict[uuid.UUID, int] = field(default_factory=dict)

    # Relationship index, credit ids in insertion order
    _customer_credits: dict[int, list[int]] = field(default_factory=dict)

    # Id sequences
    _customer_seq: int = 0
    _credit_seq: int = 0

    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def add_customer(self, customer: Customer) -> Customer:
        """Insert a new customer, assigning its id."""
        with self._lock:
            self._check_customer_unique(customer, exclude_id=None)
            self._customer_seq += 1
            customer.id = self._customer_seq
            self.customers[customer.id] = copy.deepcopy(customer)
            self._cpf_index[customer.cpf] = customer.id
            self._email_index[customer.email] = customer.id
            self._customer_credits[customer.id] = []
        return customer

    def update_customer(self, customer: Customer) -> Customer:
        """Replace a stored customer with the given state."""
        with self._lock:
            stored = self.customers.get(customer.id)
            if stored is None:
                raise NotFoundError(f"Id {customer.id} not found")
            self._check_customer_unique(customer, exclude_id=customer.id)
            del self._cpf_index[stored.cpf]
            del self._email_index[stored.email]
            self.customers[customer.id] = copy.deepcopy(customer)
            self._cpf_index[customer.cpf] = customer.id
            self._email_index[customer.email] = customer.id
        return customer

    def get_customer(self, customer_id: int) -> Customer | None:
        """Get a customer by id, or None."""
        with self._lock:
            stored = self.customers.get(customer_id)
            return copy.deepcopy(stored) if stored is not None else None

    def delete_customer(self, customer_id: int) -> None:
        """Delete a customer and every credit it owns."""
        with self._lock:
            stored = self.customers.pop(customer_id, None)
            if stored is None:
                raise NotFoundError(f"Id {customer_id} not found")
            del self._cpf_index[stored.cpf]
            del self._email_index[stored.email]
            credit_ids = self._customer_credits.pop(customer_id, [])
            for credit_id in credit_ids:
                credit = self.credits.pop(credit_id)
                del self._code_index[credit.credit_code]
        logger.debug("Deleted customer %s with %d credits", customer_id, len(credit_ids))

    def add_credit(self, credit: Credit) -> Credit:
        """Insert a new credit, assigning its id."""
        with self._lock:
            if credit.customer_id not in self.customers:
                raise NotFoundError(f"Id {credit.customer_id} not found")
            if credit.credit_code in self._code_index:
                raise ConflictError(f"Creditcode {credit.credit_code} already exists")
            self._credit_seq += 1
            credit.id = self._credit_seq
            self.credits[credit.id] = replace(credit, customer=None)
            self._code_index[credit.credit_code] = credit.id
            self._customer_credits[credit.customer_id].append(credit.id)
        return credit

    def get_credit_by_code(self, credit_code: uuid.UUID) -> Credit | None:
        """Get a credit by its code, or None."""
        with self._lock:
            credit_id = self._code_index.get(credit_code)
            if credit_id is None:
                return None
            return replace(self.credits[credit_id])

    def get_customer_credits(self, customer_id: int) -> list[Credit]:
        """Get all credits for a customer in insertion order."""
        with self._lock:
            credit_ids = self._customer_credits.get(customer_id, [])
            return [replace(self.credits[cid]) for cid in credit_ids]

    def delete_credit(self, credit_id: int) -> None:
        with self._lock:
            credit = self.credits.pop(credit_id, None)
            if credit is None:
                return
            del self._code_index[credit.credit_code]
            self._customer_credits[credit.customer_id].remove(credit_id)

    def delete_all_credits(self) -> None:
        """Remove every credit, keeping customers."""
        with self._lock:
            self.credits.clear()
            self._code_index.clear()
            for credit_ids in self._customer_credits.values():
                credit_ids.clear()

    def delete_all(self) -> None:
        """Remove every entity. Id sequences keep counting."""
        with self._lock:
            self.customers.clear()
            self.credits.clear()
            self._cpf_index.clear()
            self._email_index.clear()
            self._code_index.clear()
            self._customer_credits.clear()

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        with self._lock:
            return {
                "customers": len(self.customers),
                "credits": len(self.credits),
            }

    def _check_customer_unique(self, customer: Customer, exclude_id: int | None) -> None:
        owner = self._cpf_index.get(customer.cpf)
        if owner is not None and owner != exclude_id:
            raise ConflictError(f"CPF {customer.cpf} already registered")
        owner = self._email_index.get(customer.email)
        if owner is not None and owner != exclude_id:
            raise ConflictError(f"Email {customer.email} already registered")
