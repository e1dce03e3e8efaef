"""
Sample Portfolio Data

Fixed bundle of sample properties used to populate an empty database for
development and demos. Records are in store format (``unit``, role objects),
not the canonical front-end format, and are keyed by store state name and
store property key.
"""

import logging
from typing import Any

from property_services.catalog.property_catalog import PropertyCatalog

logger = logging.getLogger(__name__)


def _staff(vp: str, rem: str, rsd: str, ds: str, pm: str) -> dict[str, dict[str, str]]:
    """Build the role records from full names; emails follow first.last@example.com."""
    def person(name: str) -> dict[str, str]:
        return {'name': name, 'email': f"{name.lower().replace(' ', '.')}@example.com"}

    return {
        'vp': person(vp),
        'rem': person(rem),
        'rsd': person(rsd),
        'ds': person(ds),
        'pm': person(pm),
    }


SAMPLE_PROPERTIES: dict[str, dict[str, dict[str, Any]]] = {
    'Delaware': {
        'westover-pointe': {
            'name': 'Westover Pointe',
            'address': '500 Westover Dr, New Castle, DE 19720',
            'unit': '216',
            **_staff('Jane Smith', 'Robert Johnson', 'Emily Davis', 'Michael Wilson', 'Sarah Thompson'),
        },
        'hunters-crossing': {
            'name': 'Hunters Crossing',
            'address': '123 Hunters Way, Newark, DE 19711',
            'unit': '180',
            **_staff('Thomas Walker', 'Jennifer Lee', 'David Brown', 'Melissa Green', 'Richard Hill'),
        },
    },
    'Pennsylvania': {
        '1869west': {
            'name': '1869 West',
            'address': '1869 Chessland St #15, Pittsburgh, PA 15205',
            'unit': '150',
            **_staff('Thomas Walker', 'Jennifer Lee', 'David Brown', 'Melissa Green', 'Richard Hill'),
        },
        '214vine': {
            'name': '214 Vine',
            'address': '214 Vine St, Philadelphia, PA 19106',
            'unit': '120',
            **_staff('Karen Martinez', 'James Wilson', 'Patricia Taylor', 'Joseph Anderson', 'Linda Thomas'),
        },
    },
    'New Jersey': {
        'aspen-court': {
            'name': 'Aspen Court',
            'address': '2800 New Brunswick Ave, Piscataway, NJ 08854',
            'unit': '190',
            **_staff('William Clark', 'Barbara Lewis', 'Charles White', 'Elizabeth Harris', 'Robert Brown'),
        },
        'cherry-hill-towers': {
            'name': 'Cherry Hill Towers',
            'address': '2145 NJ-38, Cherry Hill, NJ 08002',
            'unit': '250',
            **_staff('Daniel Turner', 'Susan Martin', 'Kevin Johnson', 'Lisa Wilson', 'Brian Davis'),
        },
    },
    'Maryland': {
        'iron-ridge': {
            'name': 'Iron Ridge',
            'address': '2950 Stone Gate Blvd, Elkton, MD 21921',
            'unit': '175',
            **_staff('Mark Anderson', 'Nancy Thompson', 'George Rodriguez', 'Donna Martinez', 'Edward Wilson'),
        },
    },
    'Ohio': {
        'millcroft': {
            'name': 'Millcroft',
            'address': '10 Commons Dr, Milford, OH 45150',
            'unit': '202',
            **_staff('Paul Lewis', 'Michelle Clark', 'Kenneth Walker', 'Laura Harris', 'Steven Young'),
        },
    },
    'Virginia': {
        'chesterfield-flats': {
            'name': 'Chesterfield Flats',
            'address': '100 Main Street, Richmond, VA 23235',
            'unit': '168',
            **_staff('Anthony Turner', 'Kimberly Moore', 'Donald Hill', 'Sharon Scott', 'Ronald Adams'),
        },
    },
    'Indiana': {
        'meridian-north': {
            'name': 'The Meridian North',
            'address': '2100 Westlane Rd, Indianapolis, IN 46260',
            'unit': '185',
            **_staff('Carol Evans', 'Raymond King', 'Sandra White', 'Jerry Wright', 'Deborah Green'),
        },
    },
}


def initialize_sample_data(catalog: PropertyCatalog, dry_run: bool = False) -> dict[str, int]:
    """
    Write every sample property to the store.

    Existing records at the same paths are overwritten. The first failed
    write stops the run and its StoreError propagates.

    Args:
        catalog: Catalog used for the writes
        dry_run: If True, log what would be written without writing

    Returns:
        Dictionary with statistics:
        - states: Number of states in the bundle
        - properties: Number of properties in the bundle
        - saved: Number of properties written
    """
    stats = {
        'states': len(SAMPLE_PROPERTIES),
        'properties': sum(len(props) for props in SAMPLE_PROPERTIES.values()),
        'saved': 0,
    }

    logger.info("Starting sample data initialization", extra={'dry_run': dry_run})

    for state, properties in SAMPLE_PROPERTIES.items():
        for property_key, record in properties.items():
            if dry_run:
                logger.info(f"DRY RUN: Would save property {property_key} in {state}")
                continue

            logger.info(f"Saving property: {property_key} in {state}")
            catalog.save_property_data(state, property_key, record)
            stats['saved'] += 1

    logger.info("Sample data initialization completed", extra=stats)
    return stats
