"""Application factory."""

from datetime import date
from typing import Callable

from fastapi import FastAPI

from credit_system.api import credits, customers
from credit_system.api.errors import register_exception_handlers
from credit_system.config import AppConfig
from credit_system.logging import get_logger
from credit_system.services import CreditService, CustomerService
from credit_system.store import CreditDataStore

logger = get_logger(__name__)


def create_app(
    config: AppConfig | None = None,
    store: CreditDataStore | None = None,
    clock: Callable[[], date] = date.today,
) -> FastAPI:
    """Build the FastAPI application.

    Parameters
    ----------
    config : AppConfig | None
        Application configuration; defaults are used when omitted.
    store : CreditDataStore | None
        Persistence collaborator; a fresh in-memory store when omitted.
    clock : Callable[[], date]
        Source of "today" for date validation.

    Returns
    -------
    FastAPI
        Configured application.
    """
    config = config or AppConfig()
    store = store if store is not None else CreditDataStore()

    app = FastAPI(title=config.api.title, version=config.api.version)
    app.state.config = config
    app.state.clock = clock
    app.state.store = store
    app.state.customer_service = CustomerService(store)
    app.state.credit_service = CreditService(store, app.state.customer_service)

    app.include_router(customers.router, prefix="/api/customers", tags=["customers"])
    app.include_router(credits.router, prefix="/api/credits", tags=["credits"])
    register_exception_handlers(app)

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok", "version": config.api.version, **store.summary()}

    logger.info("Application created: %s %s", config.api.title, config.api.version)
    return app
