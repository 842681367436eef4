"""Base models shared across entities."""

from dataclasses import dataclass


@dataclass
class Address:
    """Customer address.

    ``zip_code`` is the Brazilian CEP, kept as entered (with or without
    the hyphen).
    """

    zip_code: str
    street: str
