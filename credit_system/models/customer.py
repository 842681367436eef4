"""Customer model."""

from dataclasses import dataclass
from decimal import Decimal

from credit_system.models.base import Address


@dataclass
class Customer:
    """Credit applicant."""

    first_name: str
    last_name: str
    cpf: str  # XXX.XXX.XXX-XX
    email: str
    password: str
    address: Address
    income: Decimal
    id: int | None = None  # Assigned by the store on first save
