"""
Recipe catalog.

Responsibilities:
- Load the processed recipe catalog produced by ingestion.
- Answer candidate searches for a set of owned ingredients.
- Hand recipes to the matching engine as validated Recipe models.
"""
