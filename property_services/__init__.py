"""Property Portfolio Data Services Package.

This package contains the services that serve the property portfolio from the
remote Realtime Database:
- store: Remote store abstraction, adapters and configuration
- normalizer: Alias tables and canonical property normalization
- catalog: Read/write data access functions used by the front end
- loader: Administrative seeding and legacy HTML page migration
"""

__version__ = "0.1.0"
