"""Storefront database management CLI.

Provides commands to create and drop database schemas for all domains.

Usage:
    python src/manage.py setup-db                     # Create all tables
    python src/manage.py drop-db --domain ordering    # Drop one domain's tables
"""

import argparse
import sys

import structlog

from ordering.utils.logging import configure_logging
from shared.config import get_settings
from shared.db import drop_db, setup_db
from shared.domains import DOMAINS, init_domains

logger = structlog.get_logger(__name__)


def setup_databases(domains=None):
    """Create database schemas for the specified (or all) domains."""
    init_domains()
    targets = domains or list(DOMAINS)

    for name in targets:
        print(f"Creating {name} database schema...")
        setup_db(DOMAINS[name])
        logger.info("schema_created", domain=name, env=get_settings().env)
        print(f"  {name} schema ready.")

    print("Done.")


def drop_databases(domains=None):
    """Drop database schemas for the specified (or all) domains."""
    init_domains()
    targets = domains or list(DOMAINS)

    for name in targets:
        print(f"Dropping {name} database schema...")
        drop_db(DOMAINS[name])
        logger.info("schema_dropped", domain=name, env=get_settings().env)
        print(f"  {name} schema dropped.")

    print("Done.")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Storefront database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    setup_parser = subparsers.add_parser("setup-db", help="Create all database tables")
    setup_parser.add_argument(
        "--domain",
        choices=list(DOMAINS),
        nargs="*",
        help="Specific domain(s) to set up (default: all)",
    )

    drop_parser = subparsers.add_parser("drop-db", help="Drop all database tables")
    drop_parser.add_argument(
        "--domain",
        choices=list(DOMAINS),
        nargs="*",
        help="Specific domain(s) to drop (default: all)",
    )

    args = parser.parse_args(argv)
    configure_logging()

    if args.command == "setup-db":
        setup_databases(args.domain)
    elif args.command == "drop-db":
        drop_databases(args.domain)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
