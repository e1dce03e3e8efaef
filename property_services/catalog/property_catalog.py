"""
Property Catalog - Data Access Functions

This module is the only place the front end reads or writes property data.
Every read resolves front-end ids through the alias tables, performs a single
round trip against the injected store and normalizes whatever comes back.

Store layout:
    properties/{StateName}/{propertyKey} -> raw property record

Outcomes:
- A path with no data is a normal result: ``{}`` for collections and
  ``None`` (or the development sample) for a single property.
- Transport failures raise ``StoreError`` and are never turned into "no data".
"""

import copy
import logging
from collections.abc import Mapping
from typing import Any, Optional

from property_services.normalizer.aliases import resolve, resolve_state
from property_services.normalizer.normalize import normalize_property, slug_to_display_name, slugify_key
from property_services.store.base import RemoteStore, StoreError, join_path

logger = logging.getLogger(__name__)

DEFAULT_ROOT = 'properties'

# Served by fetch_one when a property is missing and the development
# fallback is enabled. id and name are filled in per request.
SAMPLE_PROPERTY: dict[str, Any] = {
    'id': '',
    'name': '',
    'address': '123 Main St, City, State 12345',
    'description': 'This is a sample property description. Real data needs to be loaded via the Admin page.',
    'units': '100',
    'yearBuilt': '2010',
    'renovated': '2020',
    'amenities': ['Swimming Pool', 'Fitness Center', 'Pet Friendly'],
    'contact': {
        'manager': 'John Doe',
        'phone': '(555) 123-4567',
        'email': 'john.doe@example.com',
    },
    'staff': {
        'vp': {'name': 'Jane Smith', 'email': 'jane.smith@example.com'},
        'rem': {'name': 'Robert Johnson', 'email': 'robert.johnson@example.com'},
        'rsd': {'name': 'Emily Davis', 'email': 'emily.davis@example.com'},
        'ds': {'name': 'Michael Wilson', 'email': 'michael.wilson@example.com'},
        'pm': {'name': 'Sarah Thompson', 'email': 'sarah.thompson@example.com'},
    },
    'images': ['/logo.png'],
}


def sample_property(property_slug: str) -> dict[str, Any]:
    """Return a fresh copy of the development sample for a slug."""
    prop = copy.deepcopy(SAMPLE_PROPERTY)
    prop['id'] = property_slug
    prop['name'] = slug_to_display_name(property_slug)
    return prop


class PropertyCatalog:
    """
    Read/write access to the property portfolio.

    The store is injected so the catalog can run against the live database
    or an ``InMemoryStore`` in tests. The catalog holds no mutable state of
    its own, so one instance can be shared by concurrent callers.

    Example:
        >>> from property_services.store.adapters import InMemoryStore
        >>> catalog = PropertyCatalog(InMemoryStore(), use_development_fallback=False)
        >>> catalog.fetch_by_state('ohio')
        {}
    """

    def __init__(
        self,
        store: RemoteStore,
        use_development_fallback: bool = False,
        root: str = DEFAULT_ROOT,
    ):
        """
        Initialize the catalog.

        Args:
            store: Backend used for every read and write
            use_development_fallback: If True, fetch_one returns a sample
                property instead of None for missing records
            root: Top-level store key holding the portfolio
        """
        self.store = store
        self.use_development_fallback = use_development_fallback
        self.root = root.strip('/')

    def _read(self, path: str) -> Optional[Any]:
        try:
            return self.store.get(path)
        except StoreError as e:
            logger.error(
                "Failed to read from store",
                extra={'path': path, 'error': str(e), 'error_type': type(e).__name__}
            )
            raise

    def _normalize_state(self, state_data: Any, state_key: str) -> dict[str, dict[str, Any]]:
        """Normalize every property under one state, keyed by property id."""
        if not isinstance(state_data, Mapping):
            logger.warning(
                "State subtree is not an object, skipping",
                extra={'state': state_key, 'type': type(state_data).__name__}
            )
            return {}

        properties = {}
        for property_key, record in state_data.items():
            property_id = slugify_key(str(property_key))
            if property_id in properties:
                logger.warning(
                    "Duplicate property id within state, keeping the last record",
                    extra={'state': state_key, 'property_id': property_id}
                )
            properties[property_id] = normalize_property(record, property_id, str(property_key))
        return properties

    def fetch_all(self) -> dict[str, dict[str, dict[str, Any]]]:
        """
        Fetch and normalize the whole portfolio.

        Returns:
            ``{state_id: {property_id: property}}`` where state ids are the
            store's state names lowercased. ``{}`` if the store is empty.

        Raises:
            StoreError: If the store cannot be read
        """
        raw_data = self._read(self.root)

        if raw_data is None:
            logger.info("No portfolio data found", extra={'path': self.root})
            return {}
        if not isinstance(raw_data, Mapping):
            logger.warning(
                "Portfolio root is not an object",
                extra={'path': self.root, 'type': type(raw_data).__name__}
            )
            return {}

        portfolio: dict[str, dict[str, dict[str, Any]]] = {}
        for state_key, state_data in raw_data.items():
            state_id = str(state_key).lower()
            portfolio.setdefault(state_id, {}).update(
                self._normalize_state(state_data, str(state_key))
            )

        logger.info(
            "Fetched portfolio",
            extra={
                'states': len(portfolio),
                'properties': sum(len(props) for props in portfolio.values()),
            }
        )
        return portfolio

    def fetch_by_state(self, state_id: str) -> dict[str, dict[str, Any]]:
        """
        Fetch and normalize the properties of one state.

        Args:
            state_id: Front-end state id (e.g. "newJersey", "delaware")

        Returns:
            ``{property_id: property}``, or ``{}`` if the state has no data

        Raises:
            StoreError: If the store cannot be read
        """
        state_key = resolve_state(state_id)
        if not state_key:
            return {}

        path = join_path(self.root, state_key)
        raw_data = self._read(path)

        if raw_data is None:
            logger.info("No properties found for state", extra={'state': state_key, 'path': path})
            return {}

        properties = self._normalize_state(raw_data, state_key)
        logger.info(
            "Fetched state properties",
            extra={'state': state_key, 'properties': len(properties)}
        )
        return properties

    def fetch_one(self, state_id: str, property_slug: str) -> Optional[dict[str, Any]]:
        """
        Fetch and normalize a single property.

        Args:
            state_id: Front-end state id
            property_slug: Property URL slug (e.g. "the-flats")

        Returns:
            The canonical property with ``id`` set to ``property_slug``. If the
            record does not exist: the development sample when the fallback is
            enabled, otherwise None.

        Raises:
            StoreError: If the store cannot be read
        """
        resolved = resolve(state_id, property_slug)
        path = join_path(self.root, resolved.state, resolved.property_key)

        logger.debug(
            "Fetching property",
            extra={'state_id': state_id, 'property_slug': property_slug, 'path': path}
        )

        # A blank id would address the whole state subtree.
        record = self._read(path) if resolved.state and resolved.property_key else None

        if record is not None:
            return normalize_property(record, property_slug, resolved.property_key)

        logger.warning("No property data found", extra={'path': path})

        if self.use_development_fallback:
            logger.info(
                "Returning sample property for development",
                extra={'property_slug': property_slug}
            )
            return sample_property(property_slug)

        return None

    def read_raw(self, state_id: str, property_slug: Optional[str] = None) -> Optional[Any]:
        """
        Read the raw, non-normalized value at a resolved path.

        Args:
            state_id: Front-end state id
            property_slug: Optional property slug; reads the whole state if omitted

        Returns:
            The stored value, or None if the path has no data
        """
        resolved = resolve(state_id, property_slug)
        return self._read(join_path(self.root, resolved.state, resolved.property_key))

    def save_property_data(self, state: str, property_id: str, property_data: Mapping[str, Any]) -> None:
        """
        Write a raw property record, replacing whatever is stored at its path.

        Args:
            state: State id or store state name (e.g. "Delaware")
            property_id: Property slug or store key (e.g. "westover-pointe")
            property_data: Raw record in store format (not normalized)

        Raises:
            StoreError: If the write fails
            ValueError: If state or property_id is blank
        """
        resolved = resolve(state, property_id)
        if not resolved.state or not resolved.property_key:
            raise ValueError("state and property_id must be non-empty")

        path = join_path(self.root, resolved.state, resolved.property_key)

        try:
            self.store.set(path, dict(property_data))
        except StoreError as e:
            logger.error(
                "Error saving property data",
                extra={'path': path, 'error': str(e), 'error_type': type(e).__name__}
            )
            raise

        logger.info(
            "Property data saved",
            extra={'state': resolved.state, 'property_key': resolved.property_key}
        )
