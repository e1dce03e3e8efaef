"""
Legacy HTML Page Import

Before the database existed, each state had a static page listing its
properties. This module parses those pages and writes the properties to the
store so the old content can be migrated in one pass.

Expected page structure (one block per property):
    <div id="container">
      <div>
        <h2><span>Westover Pointe</span></h2>
        <p>Address: <span>500 Westover Dr ...</span></p>
        <span id="westover-unit">216</span>
        <span id="westover-vp"><a href="mailto:jane@example.com">Jane Smith</a></span>
        <span id="westover-pm">Sarah Thompson</span>
        ...
      </div>
    </div>
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from property_services.catalog.property_catalog import PropertyCatalog
from property_services.normalizer.normalize import STAFF_ROLES, slugify_key

logger = logging.getLogger(__name__)

DEFAULT_STATES = ('Delaware', 'Indiana', 'Maryland', 'New Jersey', 'Ohio', 'Pennsylvania', 'Virginia')

UNKNOWN_PROPERTY_NAME = 'Unknown Property'


def extract_contact_info(element: Optional[Tag]) -> Optional[dict[str, str]]:
    """
    Read a person from a role element.

    A mailto link gives both name and email; plain text gives the name only.

    Returns:
        ``{'name': ..., 'email': ...}``, ``{'name': ...}``, or None when the
        element is missing or empty
    """
    if element is None:
        return None

    link = element.find('a')
    if link is not None:
        name = link.get_text(strip=True)
        email = (link.get('href') or '').replace('mailto:', '', 1).strip()
        contact = {'name': name}
        if email:
            contact['email'] = email
        return contact

    text = element.get_text(strip=True)
    return {'name': text} if text else None


def extract_property_from_html(element: Tag) -> dict[str, Any]:
    """
    Build a raw store record from one property block.

    Args:
        element: The property's ``div`` under ``#container``

    Returns:
        Record with ``name``, ``address``, ``unit`` and whichever staff roles
        were found on the page
    """
    title = element.select_one('h2 span')
    address = element.select_one('p:nth-child(2) span')
    unit = element.select_one('[id$="-unit"]')

    record: dict[str, Any] = {
        'name': title.get_text(strip=True) if title else UNKNOWN_PROPERTY_NAME,
        'address': address.get_text(strip=True) if address else '',
        'unit': unit.get_text(strip=True) if unit else '',
    }

    for role in STAFF_ROLES:
        contact = extract_contact_info(element.select_one(f'[id$="-{role}"]'))
        if contact:
            record[role] = contact

    return record


def parse_state_page(html: str) -> dict[str, dict[str, Any]]:
    """
    Parse a legacy state page.

    Returns:
        ``{property_id: record}`` where the id is the lowercased property
        name with whitespace runs replaced by dashes
    """
    soup = BeautifulSoup(html, 'lxml')

    properties = {}
    for block in soup.select('#container > div'):
        record = extract_property_from_html(block)
        properties[slugify_key(record['name'])] = record
    return properties


def _page_candidates(pages_dir: Path, state: str) -> list[Path]:
    lowered = state.lower()
    names = [f'{lowered}.html', f"{lowered.replace(' ', '')}.html", f"{lowered.replace(' ', '-')}.html"]
    return [pages_dir / name for name in dict.fromkeys(names)]


def load_properties_from_html(
    catalog: PropertyCatalog,
    pages_dir: str | Path,
    states: Iterable[str] = DEFAULT_STATES,
    dry_run: bool = False,
) -> dict[str, int]:
    """
    Migrate legacy state pages into the store.

    States without a page file are skipped with a warning. Store failures
    propagate and stop the migration.

    Args:
        catalog: Catalog used for the writes
        pages_dir: Directory holding the legacy pages
        states: Store state names to migrate
        dry_run: If True, parse pages but do not write

    Returns:
        Dictionary with statistics:
        - pages: Number of pages parsed
        - missing: Number of states without a page
        - properties: Number of properties found
        - saved: Number of properties written
    """
    pages_dir = Path(pages_dir)
    stats = {'pages': 0, 'missing': 0, 'properties': 0, 'saved': 0}

    for state in states:
        page = next((path for path in _page_candidates(pages_dir, state) if path.is_file()), None)
        if page is None:
            stats['missing'] += 1
            logger.warning(
                "No legacy page found for state",
                extra={'state': state, 'pages_dir': str(pages_dir)}
            )
            continue

        properties = parse_state_page(page.read_text(encoding='utf-8'))
        stats['pages'] += 1
        stats['properties'] += len(properties)

        for property_id, record in properties.items():
            if dry_run:
                logger.info(f"DRY RUN: Would save property {property_id} in {state}")
                continue
            catalog.save_property_data(state, property_id, record)
            stats['saved'] += 1

        logger.info(
            f"Loaded properties for {state}",
            extra={'state': state, 'page': str(page), 'properties': len(properties)}
        )

    return stats
