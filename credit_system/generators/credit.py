"""Credit request generator."""

from __future__ import annotations

import random
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterator

from credit_system.config import CreditPolicyConfig
from credit_system.dto import CreditDto
from credit_system.generators.base import BaseGenerator
from credit_system.validation import add_months


class CreditDtoGenerator(BaseGenerator):
    """Generate credit requests that fit a credit policy."""

    INSTALLMENT_CHOICES = [1, 3, 6, 10, 12, 18, 24, 36, 48]

    def __init__(
        self,
        seed: int | None = None,
        policy: CreditPolicyConfig | None = None,
    ) -> None:
        super().__init__(seed)
        self.policy = policy or CreditPolicyConfig()

    def generate(self, customer_id: int, today: date) -> CreditDto:
        """Generate a credit request for a customer.

        Parameters
        ----------
        customer_id : int
            Owner of the credit.
        today : date
            Reference date; the first installment falls inside the
            policy window after it.
        """
        window_end = add_months(today, self.policy.max_first_installment_months)
        offset = random.randint(1, (window_end - today).days)
        choices = [
            n
            for n in self.INSTALLMENT_CHOICES
            if self.policy.min_installments <= n <= self.policy.max_installments
        ] or [self.policy.min_installments]

        payload = {
            "credit_value": Decimal(random.randint(5, 500) * 100),
            "day_first_of_installment": today + timedelta(days=offset),
            "number_of_installments": random.choice(choices),
            "customer_id": customer_id,
        }
        return CreditDto.parse(payload, today=today, policy=self.policy)

    def generate_batch(self, customer_id: int, today: date, count: int) -> Iterator[CreditDto]:
        for _ in range(count):
            yield self.generate(customer_id, today)
