"""
Translation layer.

Responsibilities:
- Manage Groq API configuration and credentials.
- Translate recipe titles, ingredient names and steps for display.
- Convert Korean ingredient names to English for western catalog queries.
- Fall back to the untranslated text whenever the LLM is unavailable.
"""
