"""
Catalog ingestion package.

Responsibilities:
- Load the raw COOKRCP01 recipe dump.
- Normalize it into the canonical Recipe schema.
- Persist the processed catalog locally for the recipe data store.
"""
