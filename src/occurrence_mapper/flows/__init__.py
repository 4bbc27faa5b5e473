"""
Prefect flows for the occurrence pipeline.

Flows:
- occurrence_map: Fetch GBIF occurrences, render the Leaflet map, write HTML

Usage (local):
    python -m occurrence_mapper.flows.occurrence_map
    occurrence-mapper map --taxon-key 3240854

Usage (Prefect):
    prefect server start  # Optional, for dashboard
"""
