"""Credit model."""

import uuid
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from credit_system.models.customer import Customer
from credit_system.models.enums import Status


@dataclass
class Credit:
    """Credit requested by a customer.

    Ownership is stored as ``customer_id`` only. ``customer`` is the
    loaded relation: services attach the resolved owner after a lookup,
    the store never persists it and it takes no part in equality.
    """

    credit_value: Decimal
    day_first_of_installment: date
    number_of_installments: int
    customer_id: int
    credit_code: uuid.UUID = field(default_factory=uuid.uuid4)
    status: Status = Status.IN_PROGRESS
    id: int | None = None
    customer: Customer | None = field(default=None, compare=False, repr=False)
