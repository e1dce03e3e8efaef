"""Remote Store Adapters.

This package contains concrete implementations of the RemoteStore interface.

Available adapters:
- FirebaseStore: Firebase Realtime Database over REST (firebase_adapter.py)
- InMemoryStore: For testing and local development (memory_adapter.py)
"""

from .firebase_adapter import FirebaseStore
from .memory_adapter import InMemoryStore

__all__ = ["FirebaseStore", "InMemoryStore"]
