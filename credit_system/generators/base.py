"""Base generator class for all request generators."""

from __future__ import annotations

import random
from abc import ABC

from faker import Faker


def generate_cpf() -> str:
    """Generate a valid formatted CPF (XXX.XXX.XXX-XX) using check-digit arithmetic."""
    digits = [random.randint(0, 9) for _ in range(9)]
    # First check digit
    total = sum(d * w for d, w in zip(digits, range(10, 1, -1)))
    d1 = 11 - (total % 11)
    digits.append(0 if d1 >= 10 else d1)
    # Second check digit
    total = sum(d * w for d, w in zip(digits, range(11, 1, -1)))
    d2 = 11 - (total % 11)
    digits.append(0 if d2 >= 10 else d2)
    raw = "".join(str(d) for d in digits)
    return f"{raw[:3]}.{raw[3:6]}.{raw[6:9]}-{raw[9:]}"


class BaseGenerator(ABC):
    """Base class for request generators.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``pt_BR``).
    """

    def __init__(self, seed: int | None = None, locale: str = "pt_BR") -> None:
        self.fake = Faker(locale)
        if seed is not None:
            self.fake.seed_instance(seed)
            random.seed(seed)
