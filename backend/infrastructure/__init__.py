"""
Infrastructure layer: adapters behind the application ports.

- `catalog`: OMDb HTTP client (`MovieCatalogPort`)
- `persistence`: key-value stores for the watched list (`KeyValueStorePort`)
- `config`: environment-driven settings for the adapters
"""

__all__ = [
    "catalog",
    "config",
    "persistence",
]
