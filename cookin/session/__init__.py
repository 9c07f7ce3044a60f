"""
Search session persistence.

Responsibilities:
- Describe the restorable search state (owned ingredients, recipe type, page).
- Keep it in a small in-memory key-value store with expiry.
"""
