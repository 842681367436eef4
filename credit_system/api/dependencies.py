"""Request-scoped accessors for objects wired in ``create_app``."""

from datetime import date

from fastapi import Request

from credit_system.config import CreditPolicyConfig
from credit_system.services import CreditService, CustomerService


def get_customer_service(request: Request) -> CustomerService:
    return request.app.state.customer_service


def get_credit_service(request: Request) -> CreditService:
    return request.app.state.credit_service


def get_policy(request: Request) -> CreditPolicyConfig:
    return request.app.state.config.policy


def get_today(request: Request) -> date:
    """Current date from the application clock."""
    return request.app.state.clock()
