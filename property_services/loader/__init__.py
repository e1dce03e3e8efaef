"""
Loader Service

Administrative tools that populate the remote store.

Key responsibilities:
- Write the fixed sample portfolio for development and demos (sample_data.py)
- Migrate the legacy static state pages into the store (html_import.py)
"""

from .html_import import load_properties_from_html, parse_state_page
from .sample_data import SAMPLE_PROPERTIES, initialize_sample_data

__all__ = [
    "SAMPLE_PROPERTIES",
    "initialize_sample_data",
    "load_properties_from_html",
    "parse_state_page",
]
__version__ = "0.1.0"
