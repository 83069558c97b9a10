"""Seed a file-backed catalogue for demos and manual testing.

Writes the sample listings, optionally a batch of generated listings and
an admin account into a data directory that ``FileStorage`` can open.
Settings start from ``RealtyConfig.from_env()``; command-line flags
override them.
"""

import argparse
import sys
from pathlib import Path

from realty_store.config import RealtyConfig
from realty_store.exceptions import DuplicateAccountError, RealtyStoreError
from realty_store.generators import ListingGenerator
from realty_store.logging import get_logger, setup_logging
from realty_store.store import open_stores

logger = get_logger(__name__)

DEFAULT_SEED = 42


def seed_catalogue(
    config: RealtyConfig,
    count: int = 0,
    locale: str = "es_ES",
    admin_password: str | None = None,
) -> dict:
    """Populate the configured substrate and return the listing summary.

    Generated listings use ``config.seed``. The admin account is created
    with ``config.accounts.admin_email`` when ``admin_password`` is given.
    """
    stores = open_stores(config)

    inserted = stores.listings.initialize_sample_data()
    logger.info("Sample listings inserted: %d", inserted)

    if count:
        generator = ListingGenerator(seed=config.seed, locale=locale)
        for data in generator.generate_batch(count):
            stores.listings.create_property(data)
        logger.info("Generated listings inserted: %d (seed=%s)", count, config.seed)

    if admin_password:
        admin_email = config.accounts.admin_email
        try:
            stores.accounts.create_user(admin_email, admin_password, "Administrator")
        except DuplicateAccountError:
            logger.info("Admin account %s already exists", admin_email)

    return stores.listings.summary()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Seed a file-backed listing catalogue"
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory for the key-value files (default: REALTY_DATA_DIR or data)",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=0,
        help="Number of generated listings to add (default: 0)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help=f"Random seed for reproducibility (default: REALTY_SEED or {DEFAULT_SEED})",
    )
    parser.add_argument(
        "--locale",
        type=str,
        default="es_ES",
        help="Faker locale for generated listings (default: es_ES)",
    )
    parser.add_argument(
        "--admin-email",
        type=str,
        default=None,
        help="Admin account email (default: REALTY_ADMIN_EMAIL or admin@admin.com)",
    )
    parser.add_argument(
        "--admin-password",
        type=str,
        default=None,
        help="Create the admin account with this password",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: REALTY_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default=None,
        help="Log format (default: REALTY_LOG_FORMAT or standard)",
    )
    return parser


def config_from_args(args: argparse.Namespace, base: RealtyConfig | None = None) -> RealtyConfig:
    """Apply command-line overrides to ``base`` (environment settings by default)."""
    config = base or RealtyConfig.from_env()
    config.storage.backend = "file"
    if args.data_dir is not None:
        config.storage.data_dir = args.data_dir
    if args.seed is not None:
        config.seed = args.seed
    elif config.seed is None:
        config.seed = DEFAULT_SEED
    if args.admin_email:
        config.accounts.admin_email = args.admin_email
    if args.log_level:
        config.log_level = args.log_level
    if args.log_format:
        config.log_format = args.log_format
    return config


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = config_from_args(args)
    except RealtyStoreError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        sys.exit(2)

    setup_logging(config.log_level, config.log_format)

    try:
        summary = seed_catalogue(config, args.count, args.locale, args.admin_password)
    except RealtyStoreError as exc:
        logger.error("Seeding failed: %s", exc)
        sys.exit(1)

    print(f"Catalogue written to: {config.storage.data_dir}")
    for key, value in summary.items():
        print(f"  {key}: {value}")
