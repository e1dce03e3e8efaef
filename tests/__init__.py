"""Property Portfolio Services Test Suite.

This package contains unit and integration tests for the catalog, loader,
normalizer and store layers.

Test Structure:
- unit/: Unit tests against the in-memory store and mocked HTTP sessions
- integration/: Tests against a real Realtime Database (opt-in)
"""

__version__ = "0.1.0"
