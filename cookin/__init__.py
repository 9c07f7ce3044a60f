"""
COOKIN recipe matching service.

Subpackages:
- matching: normalization, synonym resolution, matching, scoring and ranking.
- recipes: local recipe catalog.
- data_ingestion: raw recipe dump -> processed catalog.
- translation: Groq-backed translation and the ingredient dictionary.
- session: search session state and its key-value store.
"""
