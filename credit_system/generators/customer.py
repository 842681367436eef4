"""Customer registration request generator."""

from __future__ import annotations

import random
from decimal import Decimal
from typing import Iterator

from credit_system.dto import CustomerDto
from credit_system.generators.base import BaseGenerator, generate_cpf


class CustomerDtoGenerator(BaseGenerator):
    """Generate valid synthetic customer registrations."""

    # Monthly income bounds, BRL
    INCOME_RANGE = (1500, 30000)

    def generate(self) -> CustomerDto:
        """Generate a single registration.

        Returns
        -------
        CustomerDto
            Parsed request; parsing raises if a generated field is rejected.
        """
        income = random.lognormvariate(mu=8.5, sigma=0.6)  # ~5,000 median
        income = max(self.INCOME_RANGE[0], min(income, self.INCOME_RANGE[1]))

        return CustomerDto.parse({
            "first_name": self.fake.first_name(),
            "last_name": self.fake.last_name(),
            "cpf": generate_cpf(),
            "email": self.fake.unique.email(),
            "password": self.fake.password(length=12),
            "income": Decimal(str(round(income, 2))),
            "zip_code": self.fake.postcode(),
            "street": self.fake.street_name(),
        })

    def generate_batch(self, count: int) -> Iterator[CustomerDto]:
        """Generate multiple registrations.

        Parameters
        ----------
        count : int
            Number of registrations to generate.

        Yields
        ------
        CustomerDto
            Generated registrations.
        """
        for _ in range(count):
            yield self.generate()
