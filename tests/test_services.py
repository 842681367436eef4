"""Tests for CustomerService and CreditService."""

import uuid
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from conftest import build_credit, build_customer

from credit_system.exceptions import BusinessError, ConflictError, NotFoundError
from credit_system.models import Credit
from credit_system.services import CreditService, CustomerService
from credit_system.store import CreditDataStore


@pytest.fixture
def customer_service(store: CreditDataStore) -> CustomerService:
    return CustomerService(store)


@pytest.fixture
def credit_service(store: CreditDataStore, customer_service: CustomerService) -> CreditService:
    return CreditService(store, customer_service)


class TestCustomerService:
    """Tests for CustomerService against the in-memory store."""

    def test_save_then_find_by_id(self, customer_service: CustomerService) -> None:
        saved = customer_service.save(build_customer())

        found = customer_service.find_by_id(saved.id)

        assert found == build_customer(id=saved.id)

    def test_find_by_id_missing(self, customer_service: CustomerService) -> None:
        with pytest.raises(NotFoundError, match="^Id 8 not found$"):
            customer_service.find_by_id(8)

    def test_save_duplicate_conflicts(self, customer_service: CustomerService) -> None:
        customer_service.save(build_customer())

        with pytest.raises(ConflictError):
            customer_service.save(build_customer())

    def test_update(self, customer_service: CustomerService) -> None:
        saved = customer_service.save(build_customer())
        customer = customer_service.find_by_id(saved.id)
        customer.last_name = "Silva"

        customer_service.update(customer)

        assert customer_service.find_by_id(saved.id).last_name == "Silva"

    def test_delete(self, customer_service: CustomerService) -> None:
        saved = customer_service.save(build_customer())

        customer_service.delete(saved.id)

        with pytest.raises(NotFoundError):
            customer_service.find_by_id(saved.id)

    def test_delete_missing(self, customer_service: CustomerService) -> None:
        with pytest.raises(NotFoundError, match="Id 3 not found"):
            customer_service.delete(3)


class TestCreditServiceWithMocks:
    """Tests for CreditService with mocked collaborators."""

    @pytest.fixture
    def store_mock(self) -> MagicMock:
        return MagicMock(spec=CreditDataStore)

    @pytest.fixture
    def customer_service_mock(self) -> MagicMock:
        return MagicMock(spec=CustomerService)

    @pytest.fixture
    def service(self, store_mock: MagicMock, customer_service_mock: MagicMock) -> CreditService:
        return CreditService(store_mock, customer_service_mock)

    def test_should_create_credit(
        self, service: CreditService, store_mock: MagicMock, customer_service_mock: MagicMock
    ) -> None:
        fake_customer = build_customer(id=1)
        customer_service_mock.find_by_id.return_value = fake_customer
        fake_credit = build_credit(customer_id=1)
        store_mock.add_credit.return_value = fake_credit

        actual = service.save(fake_credit)

        assert actual is fake_credit
        assert actual.customer is fake_customer
        customer_service_mock.find_by_id.assert_called_once_with(1)
        store_mock.add_credit.assert_called_once_with(fake_credit)

    def test_should_not_create_credit_for_unknown_customer(
        self, service: CreditService, store_mock: MagicMock, customer_service_mock: MagicMock
    ) -> None:
        customer_service_mock.find_by_id.side_effect = NotFoundError("Id 2 not found")

        with pytest.raises(NotFoundError, match="Id 2 not found"):
            service.save(build_credit(customer_id=2))

        store_mock.add_credit.assert_not_called()

    def test_should_find_credit_by_credit_code(
        self, service: CreditService, store_mock: MagicMock
    ) -> None:
        fake_code = uuid.uuid4()
        fake_credit = build_credit(customer_id=1, credit_code=fake_code)
        store_mock.get_credit_by_code.return_value = fake_credit
        store_mock.get_customer.return_value = build_customer(id=1)

        actual = service.find_by_credit_code(1, fake_code)

        assert actual == fake_credit
        assert actual.customer.email == "simba@simba.com"
        store_mock.get_credit_by_code.assert_called_once_with(fake_code)

    def test_should_find_all_credits_by_customer(
        self, service: CreditService, store_mock: MagicMock
    ) -> None:
        fake_credits = [build_credit()]
        store_mock.get_customer_credits.return_value = fake_credits

        actual = service.find_all_by_customer(1)

        assert actual == fake_credits
        store_mock.get_customer_credits.assert_called_once_with(1)

    def test_should_not_find_credit_by_invalid_credit_code(
        self, service: CreditService, store_mock: MagicMock
    ) -> None:
        fake_code = uuid.uuid4()
        store_mock.get_credit_by_code.return_value = None

        with pytest.raises(BusinessError) as exc_info:
            service.find_by_credit_code(1, fake_code)

        assert str(exc_info.value) == f"Creditcode {fake_code} not found"
        store_mock.get_credit_by_code.assert_called_once_with(fake_code)

    def test_should_reject_credit_of_another_customer(
        self, service: CreditService, store_mock: MagicMock
    ) -> None:
        fake_code = uuid.uuid4()
        store_mock.get_credit_by_code.return_value = build_credit(customer_id=2, credit_code=fake_code)

        with pytest.raises(BusinessError) as exc_info:
            service.find_by_credit_code(1, fake_code)

        message = str(exc_info.value)
        assert str(fake_code) in message
        assert message != f"Creditcode {fake_code} not found"
        store_mock.get_customer.assert_not_called()


class TestCreditService:
    """Tests for CreditService against the in-memory store."""

    def test_save_resolves_customer(
        self, customer_service: CustomerService, credit_service: CreditService
    ) -> None:
        customer = customer_service.save(build_customer())

        saved = credit_service.save(
            Credit(Decimal("1500.0"), date(2024, 3, 12), 6, customer_id=customer.id)
        )

        assert saved.id is not None
        assert saved.customer == customer_service.find_by_id(customer.id)
        assert saved.credit_code is not None

    def test_credit_codes_unique_across_saves(
        self, customer_service: CustomerService, credit_service: CreditService
    ) -> None:
        customer = customer_service.save(build_customer())

        codes = {
            credit_service.save(Credit(Decimal("100"), date(2024, 3, 12), 6, customer.id)).credit_code
            for _ in range(20)
        }

        assert len(codes) == 20

    def test_find_all_by_customer_in_creation_order(
        self, customer_service: CustomerService, credit_service: CreditService
    ) -> None:
        customer = customer_service.save(build_customer())
        credit_service.save(Credit(Decimal("1500.0"), date(2024, 3, 12), 6, customer.id))
        credit_service.save(Credit(Decimal("2800.0"), date(2024, 4, 25), 12, customer.id))

        credits = credit_service.find_all_by_customer(customer.id)

        assert [(c.credit_value, c.number_of_installments) for c in credits] == [
            (Decimal("1500.0"), 6),
            (Decimal("2800.0"), 12),
        ]

    def test_find_all_by_customer_without_credits(
        self, customer_service: CustomerService, credit_service: CreditService
    ) -> None:
        customer = customer_service.save(build_customer())

        assert credit_service.find_all_by_customer(customer.id) == []

    def test_find_by_credit_code_loads_customer(
        self, customer_service: CustomerService, credit_service: CreditService
    ) -> None:
        customer = customer_service.save(build_customer())
        saved = credit_service.save(Credit(Decimal("1500.0"), date(2024, 3, 12), 6, customer.id))

        found = credit_service.find_by_credit_code(customer.id, saved.credit_code)

        assert found == saved
        assert found.customer.income == Decimal("1000.0")

    def test_find_by_credit_code_of_other_customer(
        self, customer_service: CustomerService, credit_service: CreditService
    ) -> None:
        owner = customer_service.save(build_customer())
        other = customer_service.save(build_customer(cpf="111.222.333-44", email="o@simba.com"))
        saved = credit_service.save(Credit(Decimal("1500.0"), date(2024, 3, 12), 6, owner.id))

        with pytest.raises(BusinessError, match=str(saved.credit_code)):
            credit_service.find_by_credit_code(other.id, saved.credit_code)

    def test_installment_schedule(
        self, customer_service: CustomerService, credit_service: CreditService
    ) -> None:
        customer = customer_service.save(build_customer())
        saved = credit_service.save(Credit(Decimal("900"), date(2024, 1, 31), 4, customer.id))

        schedule = credit_service.installment_schedule(customer.id, saved.credit_code)

        assert schedule == [
            date(2024, 1, 31),
            date(2024, 2, 29),
            date(2024, 3, 31),
            date(2024, 4, 30),
        ]

    def test_installment_schedule_unknown_code(self, credit_service: CreditService) -> None:
        code = uuid.uuid4()

        with pytest.raises(BusinessError, match=f"Creditcode {code} not found"):
            credit_service.installment_schedule(1, code)
