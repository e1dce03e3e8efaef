"""
Alias Tables for Store Addressing

Front-end routes use lowercase state ids and dashed property slugs, while the
Realtime Database is keyed by properly cased state names and by property keys
that followed several naming schemes over time. These tables translate the
former into the latter.

Lookups are total: an id that is not in a table passes through unchanged, so
an unknown id only fails later as a "not found" read.
"""

from types import MappingProxyType
from typing import NamedTuple, Optional


# Front-end state id -> store state key
_STATE_ALIASES = {
    'newJersey': 'New Jersey',
    'newjersey': 'New Jersey',
    'new-jersey': 'New Jersey',
    'new jersey': 'New Jersey',
    'delaware': 'Delaware',
    'indiana': 'Indiana',
    'maryland': 'Maryland',
    'ohio': 'Ohio',
    'pennsylvania': 'Pennsylvania',
    'virginia': 'Virginia',
}

# URL slug -> store property key
_PROPERTY_ALIASES = {
    # Delaware
    'westover-pointe': 'westover-pointe',
    'hunters-crossing': 'hunters-crossing',
    'liberty-pointe': 'liberty-pointe',

    # Indiana
    'meridian-south': 'meridian-south',
    'meridian-north': 'meridian-north',

    # Maryland
    'iron-ridge': 'iron-ridge',
    'landmark-glen-station': 'landmark',
    'mariners-pointe': 'mariners-pointe',
    'metro-pointe': 'metro-pointe',
    'scotland-heights': 'scotland-heights',
    'stonegate-iron-ridge': 'stonegate',
    'the-flats': 'flats',
    'the-ridge': 'ridge',
    'yorkshire-apartments': 'yorkshire',

    # New Jersey
    'aspen-court': 'aspen-court',
    'cherry-hill-towers': 'cherry-hill-towers',
    'fox-pointe': 'fox-pointe',
    'haven-new-providence': 'haven',
    'holly-court': 'holly-court',
    'joralemon': 'joralemon',
    'orchard-park': 'orchard-park',
    'overlook-at-flanders': 'overlook',
    'parc-at-cherry-hill': 'parcCherry',
    'parc-at-lyndhurst': 'parcLyn',
    'parc-at-maplewood-station': 'parcMaple',
    'parc-at-roxbury': 'parcRox',
    'silverlake': 'silverlake',
    'the-brunswick': 'brunswick',
    'the-colony-at-chews-landing': 'colony',
    'the-george-new-brunswick': 'georgeNB',
    'the-monroe': 'monroe',
    'the-woodlands': 'woodlands',

    # Ohio
    'millcroft': 'millcroft',
    'pointe-at-northern-woods': 'pointeNW',
    'ponderosa': 'ponderosa',
    'reserves-at-arlington': 'reserves-arlington',
    'reserves-at-northern-woods': 'reservesNW',

    # Pennsylvania
    '1869-west': '1869west',
    '214-vine': '214vine',
    'aston-pointe': 'aston-pointe',
    'cheltenham-station': 'cheltenham-station',
    'cosmopolitan': 'cosmopolitan',
    'franklin-commons': 'franklin-commons',
    'greenspring': 'greenspring',
    'lehigh-square': 'lehigh',
    'lehigh-square-b': 'lehigh-B',
    'metal-works': 'metal-works',
    'parc-at-west-pointe': 'parcWest',
    'river-oaks': 'river-oaks',
    'river-pointe': 'river-pointe',
    'springhouse-townhomes': 'springhouse',
    'terminal-21': 'terminal21',
    'the-addison': 'addison',
    'the-alden': 'alden',
    'the-commons': 'commons',
    'the-nolan': 'nolan',
    'the-residence-at-st-josephs': 'residence-josephs',
    'the-view-at-north-hills': 'viewNorth',
    'the-wellington': 'wellington',
    'valley-park': 'valley-park',

    # Virginia
    'chesterfield-flats': 'chesterfield-flats',
    'chesapeake-pointe': 'chesapeake-pointe',
    'harborstone': 'harborstone',
    'james-river-pointe': 'james-river-pointe',
    'pointe-at-river-city': 'pointe-river-city',
    'reserves-at-tidewater': 'reserves-tidewater',
}

STATE_ALIASES = MappingProxyType(_STATE_ALIASES)
PROPERTY_ALIASES = MappingProxyType(_PROPERTY_ALIASES)


class ResolvedPath(NamedTuple):
    """Store keys for a front-end (state, property) pair."""

    state: str
    property_key: Optional[str] = None


def resolve_state(state_id: str) -> str:
    """Map a front-end state id to the store's state key.

    Examples:
        >>> resolve_state('newJersey')
        'New Jersey'
        >>> resolve_state('Texas')
        'Texas'
    """
    return STATE_ALIASES.get(state_id, state_id)


def resolve_property(property_slug: str) -> str:
    """Map a property URL slug to the store's property key.

    Examples:
        >>> resolve_property('the-flats')
        'flats'
        >>> resolve_property('unknown-slug')
        'unknown-slug'
    """
    return PROPERTY_ALIASES.get(property_slug, property_slug)


def resolve(state_id: str, property_slug: Optional[str] = None) -> ResolvedPath:
    """Resolve a state id and optional property slug in one call."""
    property_key = resolve_property(property_slug) if property_slug is not None else None
    return ResolvedPath(state=resolve_state(state_id), property_key=property_key)
