"""
Normalizer Service

This service turns raw property records from the Realtime Database into the
canonical format consumed by the front end.

Key responsibilities:
- Resolve front-end state ids and property slugs to store keys (aliases.py)
- Fill every optional field with its default (normalize.py)
- Derive the primary contact from the property manager role
"""

from .aliases import PROPERTY_ALIASES, STATE_ALIASES, ResolvedPath, resolve, resolve_property, resolve_state
from .normalize import (
    CANONICAL_FIELDS,
    PLACEHOLDER_IMAGE,
    STAFF_ROLES,
    empty_property,
    normalize_property,
    slug_to_display_name,
    slugify_key,
    validate_canonical,
)

__all__ = [
    "STATE_ALIASES",
    "PROPERTY_ALIASES",
    "ResolvedPath",
    "resolve",
    "resolve_state",
    "resolve_property",
    "CANONICAL_FIELDS",
    "PLACEHOLDER_IMAGE",
    "STAFF_ROLES",
    "empty_property",
    "normalize_property",
    "slug_to_display_name",
    "slugify_key",
    "validate_canonical",
]
__version__ = "0.1.0"
