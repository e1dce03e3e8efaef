"""
Loader Service - Main Entry Point

Populates the remote store with sample data or with properties migrated from
the legacy static state pages.

Usage:
    python -m property_services.loader.main [OPTIONS]

Options:
    --seed               Write the fixed sample portfolio
    --from-html DIR      Migrate legacy state pages found in DIR
    --dry-run            Show what would be written without writing
    --config PATH        Store configuration file (default: config/store.yml)
    --verbose            Enable debug logging
    --help               Show this message and exit

Examples:
    # Populate a fresh database with sample properties:
    python -m property_services.loader.main --seed

    # Preview a migration of the legacy pages:
    python -m property_services.loader.main --from-html ./legacy --dry-run

Exit Codes:
    0: Success
    2: Fatal error (configuration, store connection, etc.)
    130: Interrupted
"""

import argparse
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

from dotenv import load_dotenv

from property_services.catalog.property_catalog import PropertyCatalog
from property_services.store.base import StoreError
from property_services.store.store_config import create_store, load_store_config

from .html_import import load_properties_from_html
from .sample_data import initialize_sample_data

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description='Populate the property store',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        '--seed',
        action='store_true',
        help='Write the fixed sample portfolio'
    )
    source.add_argument(
        '--from-html',
        type=str,
        help='Directory containing legacy state pages',
        default=None,
        dest='html_dir'
    )

    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Show what would be written without writing',
        dest='dry_run'
    )

    parser.add_argument(
        '--config',
        type=str,
        help='Path to the store configuration file',
        default=None
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    return parser.parse_args(argv)


def run_loader(
    catalog: PropertyCatalog,
    seed: bool = False,
    html_dir: Optional[str] = None,
    dry_run: bool = False
) -> dict[str, int]:
    """
    Run the selected load.

    Args:
        catalog: Catalog used for writes
        seed: Write the sample portfolio
        html_dir: Directory of legacy pages to migrate
        dry_run: If True, don't write to the store

    Returns:
        Statistics from the load that ran
    """
    start_time = datetime.now(timezone.utc)

    if seed:
        stats = initialize_sample_data(catalog, dry_run=dry_run)
    else:
        stats = load_properties_from_html(catalog, html_dir, dry_run=dry_run)

    duration = (datetime.now(timezone.utc) - start_time).total_seconds()
    logger.info(
        "Loader completed",
        extra={'duration_seconds': duration, 'dry_run': dry_run, **stats}
    )
    return stats


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for the loader.

    Returns:
        Exit code (0 = success, 2 = fatal error)
    """
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Debug logging enabled")

    try:
        config = load_store_config(args.config)
        catalog = PropertyCatalog(
            create_store(config),
            use_development_fallback=config.use_development_fallback,
            root=config.root,
        )

        stats = run_loader(
            catalog,
            seed=args.seed,
            html_dir=args.html_dir,
            dry_run=args.dry_run
        )

    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Configuration error: {e}")
        return 2

    except StoreError as e:
        logger.error(f"Store error: {e}")
        return 2

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130

    if args.dry_run:
        logger.info(f"DRY RUN: {stats.get('properties', 0)} properties would be written")
    else:
        logger.info(f"Saved {stats['saved']} properties")
    return 0


if __name__ == '__main__':
    sys.exit(main())
