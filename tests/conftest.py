"""Pytest configuration and fixtures."""

import uuid
from datetime import date
from decimal import Decimal

import pytest

from credit_system.dto import CreditDto, CustomerDto
from credit_system.models import Address, Credit, Customer, Status
from credit_system.store import CreditDataStore

TODAY = date(2024, 1, 10)


def build_customer(
    first_name: str = "Henrique",
    last_name: str = "Pedro",
    cpf: str = "573.310.710-33",
    email: str = "simba@simba.com",
    password: str = "123123",
    zip_code: str = "88302500",
    street: str = "Rua da Selva",
    income: Decimal = Decimal("1000.0"),
    id: int | None = None,
) -> Customer:
    return Customer(
        first_name=first_name,
        last_name=last_name,
        cpf=cpf,
        email=email,
        password=password,
        address=Address(zip_code=zip_code, street=street),
        income=income,
        id=id,
    )


def build_credit(
    customer_id: int = 1,
    credit_code: uuid.UUID = uuid.UUID("14160cff-1c90-424d-a532-c2df6f02d25c"),
    credit_value: Decimal = Decimal("1500.0"),
    day_first_of_installment: date = date(2024, 3, 12),
    number_of_installments: int = 6,
    status: Status = Status.IN_PROGRESS,
    id: int | None = None,
) -> Credit:
    return Credit(
        credit_value=credit_value,
        day_first_of_installment=day_first_of_installment,
        number_of_installments=number_of_installments,
        customer_id=customer_id,
        credit_code=credit_code,
        status=status,
        id=id,
    )


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def today() -> date:
    """Reference date used as the application clock."""
    return TODAY


@pytest.fixture
def store() -> CreditDataStore:
    """Create a fresh store for each test."""
    return CreditDataStore()


@pytest.fixture
def customer_payload() -> dict:
    """camelCase registration body that passes validation."""
    return {
        "firstName": "Henrique",
        "lastName": "Pedro",
        "cpf": "573.310.710-33",
        "email": "simba@simba.com",
        "password": "123123",
        "income": 1000.0,
        "zipCode": "88302500",
        "street": "Rua da Selva",
    }


@pytest.fixture
def credit_payload() -> dict:
    """camelCase credit body valid against TODAY and the default policy."""
    return {
        "creditValue": 1500.0,
        "dayFirstOfInstallment": "2024-03-12",
        "numberOfInstallments": 6,
        "customerId": 1,
    }


@pytest.fixture
def customer_dto(customer_payload: dict) -> CustomerDto:
    return CustomerDto.parse(customer_payload)


@pytest.fixture
def credit_dto(credit_payload: dict) -> CreditDto:
    return CreditDto.parse(credit_payload, today=TODAY)
