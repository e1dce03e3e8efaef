"""
Pytest configuration and shared fixtures

This file contains test fixtures that can be used across all tests.
Fixtures are reusable components that set up test preconditions.

Learn more: https://docs.pytest.org/en/stable/fixture.html
"""

import os

import pytest

from property_services.catalog.property_catalog import PropertyCatalog
from property_services.store.adapters.memory_adapter import InMemoryStore


@pytest.fixture(scope="session")
def firebase_test_url() -> str | None:
    """
    Provide the Realtime Database URL used by integration tests.

    Integration tests are skipped when this is not set.

    Scope: session (created once per test run)
    """
    return os.getenv("FIREBASE_TEST_DATABASE_URL")


@pytest.fixture(scope="function")
def sample_raw_property() -> dict:
    """
    Provide a fully filled-in raw property record, as stored in the database.

    Scope: function (created fresh for each test)

    Returns:
        dict: Raw property record
    """
    return {
        "name": "Westover Pointe",
        "address": "500 Westover Dr, New Castle, DE 19720",
        "description": "Garden-style apartments near Route 13.",
        "unit": "216",
        "yearBuilt": "1969",
        "renovated": "2018",
        "amenities": ["Swimming Pool", "Fitness Center"],
        "phone": "(302) 555-0100",
        "images": ["/images/westover-1.jpg", "/images/westover-2.jpg"],
        "vp": {"name": "Jane Smith", "email": "jane.smith@example.com"},
        "rem": {"name": "Robert Johnson", "email": "robert.johnson@example.com"},
        "rsd": {"name": "Emily Davis", "email": "emily.davis@example.com"},
        "ds": {"name": "Michael Wilson", "email": "michael.wilson@example.com"},
        "pm": {"name": "Sarah Thompson", "email": "sarah.thompson@example.com"},
    }


@pytest.fixture(scope="function")
def portfolio_data(sample_raw_property) -> dict:
    """
    Provide a small portfolio in store layout.

    Returns:
        dict: {"properties": {StateName: {propertyKey: record}}}
    """
    return {
        "properties": {
            "Delaware": {
                "westover-pointe": sample_raw_property,
                "hunters-crossing": {"unit": 180, "pm": {"name": "Richard Hill"}},
            },
            "New Jersey": {
                "parcCherry": {"name": "Parc at Cherry Hill", "address": "1 Parc Dr"},
            },
            "Maryland": {
                "flats": {"amenities": ["Rooftop Deck"]},
            },
        }
    }


@pytest.fixture(scope="function")
def memory_store(portfolio_data) -> InMemoryStore:
    """Provide an in-memory store seeded with the sample portfolio."""
    return InMemoryStore(portfolio_data)


@pytest.fixture(scope="function")
def catalog(memory_store) -> PropertyCatalog:
    """Provide a production-mode catalog over the seeded store."""
    return PropertyCatalog(memory_store, use_development_fallback=False)


@pytest.fixture(scope="function")
def dev_catalog(memory_store) -> PropertyCatalog:
    """Provide a catalog with the development fallback enabled."""
    return PropertyCatalog(memory_store, use_development_fallback=True)


# Mark tests based on their type for selective running
def pytest_configure(config):
    """
    Register custom pytest markers.

    This allows us to run specific test categories:
    - pytest -m unit        (run only unit tests)
    - pytest -m integration (run only integration tests)
    - pytest -m "not slow"  (skip slow tests)
    """
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test (isolated, fast)"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test (requires services)"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running (>1 second)"
    )
