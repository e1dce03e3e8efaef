"""
Catalog Service - Main Entry Point

Command-line access to the property catalog, mainly for checking what the
front end will receive for a given route.

Usage:
    python -m property_services.catalog.main [OPTIONS]

Options:
    --state TEXT        Front-end state id (e.g. 'newJersey', 'delaware')
    --property TEXT     Property slug (requires --state)
    --raw               Print the stored record instead of the normalized one
    --config PATH       Store configuration file (default: config/store.yml)
    --verbose           Enable debug logging
    --help              Show this message and exit

Examples:
    # Whole portfolio, grouped by state:
    python -m property_services.catalog.main

    # One state:
    python -m property_services.catalog.main --state delaware

    # One property, as stored:
    python -m property_services.catalog.main --state maryland --property the-flats --raw

Exit Codes:
    0: Success
    1: Property not found
    2: Fatal error (configuration, store connection, etc.)
"""

import argparse
import json
import logging
import sys
from typing import Any, Optional

from dotenv import load_dotenv

from property_services.store.base import StoreError
from property_services.store.store_config import create_store, load_store_config

from .property_catalog import PropertyCatalog

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
        description='Print normalized property data from the remote store',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    parser.add_argument(
        '--state',
        type=str,
        help='Front-end state id (e.g. "delaware")',
        default=None
    )

    parser.add_argument(
        '--property',
        type=str,
        help='Property slug (e.g. "westover-pointe")',
        default=None,
        dest='property_slug'
    )

    parser.add_argument(
        '--raw',
        action='store_true',
        help='Print the stored record without normalization'
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

    args = parser.parse_args(argv)
    if args.property_slug and not args.state:
        parser.error('--property requires --state')
    return args


def run_query(
    catalog: PropertyCatalog,
    state: Optional[str] = None,
    property_slug: Optional[str] = None,
    raw: bool = False
) -> Optional[Any]:
    """
    Run the catalog read selected by the arguments.

    Args:
        catalog: Catalog to read from
        state: Front-end state id, or None for the whole portfolio
        property_slug: Property slug, or None for a whole state
        raw: Return stored data instead of normalized data

    Returns:
        The data to print; None when a single property was not found
    """
    if raw:
        if state is None:
            return catalog.store.get(catalog.root)
        return catalog.read_raw(state, property_slug)

    if state is None:
        return catalog.fetch_all()
    if property_slug is None:
        return catalog.fetch_by_state(state)
    return catalog.fetch_one(state, property_slug)


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for the catalog CLI.

    Returns:
        Exit code (0 = success, 1 = not found, 2 = fatal error)
    """
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr)
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

        result = run_query(
            catalog,
            state=args.state,
            property_slug=args.property_slug,
            raw=args.raw
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

    if result is None and args.property_slug:
        logger.warning(
            "Property not found",
            extra={'state': args.state, 'property_slug': args.property_slug}
        )
        return 1

    json.dump(result, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write('\n')
    return 0


if __name__ == '__main__':
    sys.exit(main())
