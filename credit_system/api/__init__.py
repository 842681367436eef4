"""HTTP API for the credit system."""

from credit_system.api.app import create_app

__all__ = ["create_app"]
