"""Inbound transfer objects.

Requests are pydantic models parsed from camelCase JSON. Type errors, field
constraints and the clock and policy dependent credit rules are checked in
one pass, so a rejected request lists every violated field.
"""

from datetime import date
from decimal import Decimal
from typing import Annotated, Any, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    StringConstraints,
    ValidationInfo,
    field_validator,
)
from pydantic import ValidationError as PydanticValidationError

from credit_system.config import CreditPolicyConfig
from credit_system.exceptions import ValidationError
from credit_system.models import Address, Credit, Customer
from credit_system.serialization import to_camel
from credit_system.validation import (
    CPF_PATTERN,
    Violation,
    check_first_installment,
    check_installments,
    violations_from_errors,
)

NotBlank = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

RequestT = TypeVar("RequestT", bound="RequestModel")


class RequestModel(BaseModel):
    """Base for request bodies: camelCase aliases, snake_case attributes.

    Validation context keys read by subclasses are ``today`` and ``policy``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def violations(cls, payload: Any, **context: Any) -> list[Violation]:
        """Return every violated constraint of ``payload`` (empty when valid)."""
        try:
            cls.model_validate(payload, context=context)
        except PydanticValidationError as e:
            return violations_from_errors(e.errors())
        return []

    @classmethod
    def parse(cls: type[RequestT], payload: Any, **context: Any) -> RequestT:
        """Validate ``payload`` into a request.

        Raises
        ------
        ValidationError
            Listing every violation, when the payload is rejected.
        """
        try:
            return cls.model_validate(payload, context=context)
        except PydanticValidationError as e:
            raise ValidationError(violations_from_errors(e.errors())) from e


class CustomerDto(RequestModel):
    """Customer registration request."""

    first_name: NotBlank
    last_name: NotBlank
    cpf: str = Field(pattern=CPF_PATTERN)
    email: EmailStr
    password: NotBlank
    income: Decimal = Field(ge=0)
    zip_code: NotBlank
    street: NotBlank

    def to_entity(self) -> Customer:
        return Customer(
            first_name=self.first_name,
            last_name=self.last_name,
            cpf=self.cpf,
            email=self.email,
            password=self.password,
            address=Address(zip_code=self.zip_code, street=self.street),
            income=self.income,
        )


class CustomerUpdateDto(RequestModel):
    """Profile update request; cpf, email and password are not editable."""

    first_name: NotBlank
    last_name: NotBlank
    income: Decimal = Field(ge=0)
    zip_code: NotBlank
    street: NotBlank

    def to_entity(self, customer: Customer) -> Customer:
        """Merge the update into an existing customer and return it."""
        customer.first_name = self.first_name
        customer.last_name = self.last_name
        customer.income = self.income
        customer.address = Address(zip_code=self.zip_code, street=self.street)
        return customer


class CreditDto(RequestModel):
    """Credit request; the customer is referenced by id, not embedded.

    The first installment window and the installment bounds come from the
    validation context (``today`` and ``policy``). Without one, the
    current date and the default :class:`CreditPolicyConfig` apply.
    """

    credit_value: Decimal = Field(gt=0)
    day_first_of_installment: date
    number_of_installments: int
    customer_id: int

    @field_validator("day_first_of_installment")
    @classmethod
    def first_installment_in_window(cls, value: date, info: ValidationInfo) -> date:
        today, policy = _credit_context(info)
        return check_first_installment(value, today, policy.max_first_installment_months)

    @field_validator("number_of_installments")
    @classmethod
    def installments_in_bounds(cls, value: int, info: ValidationInfo) -> int:
        _, policy = _credit_context(info)
        return check_installments(value, policy.min_installments, policy.max_installments)

    def to_entity(self) -> Credit:
        return Credit(
            credit_value=self.credit_value,
            day_first_of_installment=self.day_first_of_installment,
            number_of_installments=self.number_of_installments,
            customer_id=self.customer_id,
        )


def _credit_context(info: ValidationInfo) -> tuple[date, CreditPolicyConfig]:
    context = info.context or {}
    today = context.get("today") or date.today()
    policy = context.get("policy") or CreditPolicyConfig()
    return today, policy
