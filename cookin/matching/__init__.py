"""
Ingredient matching and recipe ranking engine.

Responsibilities:
- Normalize raw ingredient text and resolve synonyms to a canonical key.
- Exclude seasonings from coverage scoring.
- Match recipe ingredients against the user's owned ingredients.
- Score recipes by match rate and sort them into perfect / high / medium tiers.

Everything here is pure: no I/O, no shared mutable state, inputs untouched.
"""
