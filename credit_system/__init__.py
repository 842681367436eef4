"""Credit application backend: customers, credits and installment scheduling."""

__version__ = "1.0.0"
