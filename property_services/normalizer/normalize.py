"""
Property Normalization Logic

This module turns raw property records read from the Realtime Database into
the canonical property shape the front end renders. Records in the store are
filled in by hand and are often partial, so every optional field receives a
default and the result always carries the full set of keys.

Key Responsibilities:
- Map store field names to canonical names (e.g. ``unit`` -> ``units``)
- Apply default values for missing optional fields
- Build the staff directory and primary contact from the role records
- Accept the legacy shapes found in older data (bare-string roles, sparse arrays)
"""

import logging
import re
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)


# Staff roles in display order
STAFF_ROLES = ('vp', 'rem', 'rsd', 'ds', 'pm')

# Role whose contact details double as the property's primary contact
PRIMARY_CONTACT_ROLE = 'pm'

PLACEHOLDER_IMAGE = '/logo.png'

CANONICAL_FIELDS = (
    'id',
    'name',
    'address',
    'description',
    'units',
    'yearBuilt',
    'renovated',
    'amenities',
    'contact',
    'staff',
    'images',
)

_WHITESPACE_RUN = re.compile(r'\s+')


def slug_to_display_name(slug: str) -> str:
    """
    Build a display name from a dashed slug.

    Each dash-separated segment gets its first character upper-cased; the rest
    of the segment is kept as-is.

    Examples:
        >>> slug_to_display_name('westover-pointe')
        'Westover Pointe'
        >>> slug_to_display_name('parcCherry')
        'ParcCherry'
    """
    return ' '.join(word[:1].upper() + word[1:] for word in slug.split('-'))


def slugify_key(key: str) -> str:
    """
    Build a URL-safe property id from a store key or display name.

    Examples:
        >>> slugify_key('Aspen Court')
        'aspen-court'
    """
    return _WHITESPACE_RUN.sub('-', key.lower())


def _text(value: Any) -> str:
    """Render an optional scalar as a string; None and blanks become ''."""
    if value is None or isinstance(value, (Mapping, list, tuple)):
        return ''
    if isinstance(value, str):
        return value if value.strip() else ''
    return str(value)


def _string_list(value: Any, field_name: str) -> list[str]:
    """
    Read a list-valued field.

    The store returns arrays with holes as objects keyed by index
    (``{"0": "Pool", "2": "Gym"}``); those are read in index order.
    """
    if value is None:
        return []

    if isinstance(value, Mapping):
        def index_key(item):
            key = str(item[0])
            return (0, int(key), key) if key.isdecimal() else (1, 0, key)

        items = [item for _, item in sorted(value.items(), key=index_key)]
    elif isinstance(value, (list, tuple)):
        items = list(value)
    elif isinstance(value, str):
        items = [value]
    else:
        logger.warning(
            f"{field_name} has unsupported type, using default",
            extra={'type': type(value).__name__}
        )
        return []

    return [text for text in (_text(item) for item in items) if text]


def _role(value: Any) -> dict[str, str]:
    """Normalize one staff role record field by field."""
    if isinstance(value, str):
        # Older pages stored only the person's name.
        return {'name': _text(value), 'email': ''}

    if not isinstance(value, Mapping):
        return {'name': '', 'email': ''}

    return {
        'name': _text(value.get('name')),
        'email': _text(value.get('email')),
    }


def empty_property(id_hint: str, name_hint: str) -> dict[str, Any]:
    """Return a property with every optional field at its default."""
    return normalize_property({}, id_hint, name_hint)


def normalize_property(raw: Any, id_hint: str, name_hint: str) -> dict[str, Any]:
    """
    Normalize a raw store record into the canonical property format.

    The raw record is never modified; lists in the result are new objects.

    Args:
        raw: Record read from the store. Any key may be missing; a non-mapping
             value is treated as an empty record.
        id_hint: Identifier used as the canonical ``id``
        name_hint: Slug used to derive ``name`` when the record has none

    Returns:
        Dictionary with the canonical property:
        {
            'id': str,
            'name': str,
            'address': str,             # Default: ''
            'description': str,         # Default: ''
            'units': str,               # Default: ''
            'yearBuilt': str,           # Default: ''
            'renovated': str,           # Default: ''
            'amenities': list[str],     # Default: []
            'contact': {'manager': str, 'phone': str, 'email': str},
            'staff': {role: {'name': str, 'email': str}} for vp, rem, rsd, ds, pm,
            'images': list[str]         # Default: ['/logo.png']
        }

    Examples:
        >>> prop = normalize_property({'unit': 216}, 'westover-pointe', 'westover-pointe')
        >>> prop['name'], prop['units']
        ('Westover Pointe', '216')
    """
    if raw is None:
        raw = {}
    elif not isinstance(raw, Mapping):
        logger.warning(
            "Property record is not an object, using defaults",
            extra={'id': id_hint, 'type': type(raw).__name__}
        )
        raw = {}

    staff = {role: _role(raw.get(role)) for role in STAFF_ROLES}
    primary = staff[PRIMARY_CONTACT_ROLE]

    images = _string_list(raw.get('images'), 'images') or [PLACEHOLDER_IMAGE]

    normalized = {
        'id': id_hint,
        'name': _text(raw.get('name')) or slug_to_display_name(name_hint),
        'address': _text(raw.get('address')),
        'description': _text(raw.get('description')),
        'units': _text(raw.get('unit')),
        'yearBuilt': _text(raw.get('yearBuilt')),
        'renovated': _text(raw.get('renovated')),
        'amenities': _string_list(raw.get('amenities'), 'amenities'),
        'contact': {
            'manager': primary['name'],
            'phone': _text(raw.get('phone')),
            'email': primary['email'],
        },
        'staff': staff,
        'images': images,
    }

    logger.debug(
        "Normalized property",
        extra={'id': id_hint, 'raw_keys': sorted(str(key) for key in raw.keys())}
    )

    return normalized


def validate_canonical(prop: Any) -> bool:
    """
    Check that a value has the full canonical property shape.

    Args:
        prop: Value to check (usually the output of normalize_property)

    Returns:
        True if every canonical field is present with the expected type
    """
    if not isinstance(prop, Mapping):
        return False
    if any(field not in prop for field in CANONICAL_FIELDS):
        return False

    for field in ('id', 'name', 'address', 'description', 'units', 'yearBuilt', 'renovated'):
        if not isinstance(prop[field], str):
            return False

    for field in ('amenities', 'images'):
        if not isinstance(prop[field], list) or not all(isinstance(item, str) for item in prop[field]):
            return False

    contact = prop['contact']
    if not isinstance(contact, Mapping) or any(
        not isinstance(contact.get(key), str) for key in ('manager', 'phone', 'email')
    ):
        return False

    staff = prop['staff']
    if not isinstance(staff, Mapping) or tuple(staff.keys()) != STAFF_ROLES:
        return False

    return all(
        isinstance(staff[role], Mapping)
        and isinstance(staff[role].get('name'), str)
        and isinstance(staff[role].get('email'), str)
        for role in STAFF_ROLES
    )
