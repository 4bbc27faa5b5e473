"""External data source integrations.

Each subdirectory is one data source::

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, injectable HTTP client
    └── {feature}.py      # Fetch + transform functions

Currently only ``gbif/`` (occurrence search → WGS84 point GeoDataFrame).
"""
