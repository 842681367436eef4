#!/usr/bin/env python3
"""Seed an in-memory store with generated customers and credits.

Prints the generated credits of the first customers and the store summary
as JSON. Useful for eyeballing generated requests and the view format.
"""

import argparse
import json
import sys
from datetime import date
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from credit_system.config import AppConfig
from credit_system.dto import CreditView
from credit_system.generators import seed_store
from credit_system.logging import get_logger, setup_logging
from credit_system.services import CreditService, CustomerService
from credit_system.store import CreditDataStore

logger = get_logger(__name__)


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Seed a store with generated credits")
    parser.add_argument(
        "--customers",
        type=int,
        default=10,
        help="Number of customers to generate (default: 10)",
    )
    parser.add_argument(
        "--credits",
        type=int,
        default=2,
        help="Credits per customer (default: 2)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducibility (default: 42)",
    )
    parser.add_argument(
        "--show",
        type=int,
        default=3,
        help="Number of customers whose credits are printed (default: 3)",
    )
    args = parser.parse_args()

    config = AppConfig.from_env()
    setup_logging(config.log_level, config.log_format)

    store = CreditDataStore()
    today = date.today()
    summary = seed_store(
        store,
        num_customers=args.customers,
        credits_per_customer=args.credits,
        today=today,
        seed=args.seed,
        policy=config.policy,
    )

    credit_service = CreditService(store, CustomerService(store))
    shown = []
    for customer_id in list(store.customers)[: args.show]:
        for credit in credit_service.find_all_by_customer(customer_id):
            loaded = credit_service.find_by_credit_code(customer_id, credit.credit_code)
            shown.append(CreditView.from_entity(loaded).to_dict())

    print(json.dumps({"summary": summary, "credits": shown}, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
