"""Outbound views; none of them carries the customer password."""

import uuid
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from credit_system.models import Credit, Customer, Status
from credit_system.serialization import to_dict


@dataclass
class CreditView:
    """Single credit with the owner's contact data when the relation is loaded."""

    credit_code: uuid.UUID
    credit_value: Decimal
    day_first_of_installment: date
    number_of_installments: int
    status: Status
    email_customer: str | None
    income_customer: Decimal | None

    @classmethod
    def from_entity(cls, credit: Credit) -> "CreditView":
        customer = credit.customer
        return cls(
            credit_code=credit.credit_code,
            credit_value=credit.credit_value,
            day_first_of_installment=credit.day_first_of_installment,
            number_of_installments=credit.number_of_installments,
            status=credit.status,
            email_customer=customer.email if customer is not None else None,
            income_customer=customer.income if customer is not None else None,
        )

    def to_dict(self) -> dict:
        return to_dict(self)


@dataclass
class CreditViewList:
    """Row of the credits-by-customer listing."""

    credit_code: uuid.UUID
    credit_value: Decimal
    number_of_installments: int

    @classmethod
    def from_entity(cls, credit: Credit) -> "CreditViewList":
        return cls(
            credit_code=credit.credit_code,
            credit_value=credit.credit_value,
            number_of_installments=credit.number_of_installments,
        )

    def to_dict(self) -> dict:
        return to_dict(self)


@dataclass
class CustomerView:
    id: int | None
    first_name: str
    last_name: str
    cpf: str
    email: str
    income: Decimal
    zip_code: str
    street: str

    @classmethod
    def from_entity(cls, customer: Customer) -> "CustomerView":
        return cls(
            id=customer.id,
            first_name=customer.first_name,
            last_name=customer.last_name,
            cpf=customer.cpf,
            email=customer.email,
            income=customer.income,
            zip_code=customer.address.zip_code,
            street=customer.address.street,
        )

    def to_dict(self) -> dict:
        return to_dict(self)
