"""Remote Store Package.

This package wraps the remote document database that holds the property
portfolio.

Main components:
- RemoteStore: Abstract base class for store backends
- StoreError and subclasses: Transport failures, kept distinct from "no data"
- StoreConfig: Connection settings loaded from config/store.yml and the environment
- Adapters: Backend implementations (in adapters/ directory)
"""

from .base import RemoteStore, StoreAuthError, StoreConnectionError, StoreError
from .store_config import StoreConfig, create_store, load_store_config

__all__ = [
    "RemoteStore",
    "StoreError",
    "StoreConnectionError",
    "StoreAuthError",
    "StoreConfig",
    "create_store",
    "load_store_config",
]
