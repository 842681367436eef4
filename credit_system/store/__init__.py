"""In-memory data store for customers and credits."""

from credit_system.store.credit import CreditDataStore

__all__ = ["CreditDataStore"]
