from __future__ import annotations

import json
import logging

from groq import Groq

from ..matching.models import Recipe
from .config import DEFAULT_TRANSLATOR_CONFIG, TranslatorConfig

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a culinary translator. "
    "Translate each entry of the given numbered list from {source} to {target}. "
    "Keep ingredient names short and natural for a home cook; keep quantities "
    "and units as they are.\n\n"
    "Return ONLY valid JSON in this exact format:\n"
    '{{"translations": ["<entry 1>", "<entry 2>", ...]}}\n'
    "Return exactly one translation per input entry, in the same order."
)


def _build_user_message(texts: list[str]) -> str:
    lines = ["## Entries"]
    for i, text in enumerate(texts, start=1):
        lines.append(f"{i}. {text}")
    return "\n".join(lines)


def translate_texts(
    texts: list[str],
    config: TranslatorConfig = DEFAULT_TRANSLATOR_CONFIG,
) -> list[str]:
    """
    Translate a batch of strings with one Groq call.

    Blank entries are passed through untouched. Returns the input unchanged
    on any failure (disabled, timeout, bad JSON, wrong number of entries).
    """
    if not config.enabled or not config.api_key:
        return list(texts)

    pending = [(i, t) for i, t in enumerate(texts) if t and t.strip()]
    if not pending:
        return list(texts)

    try:
        client = Groq(api_key=config.api_key, timeout=config.timeout)
        response = client.chat.completions.create(
            model=config.model,
            messages=[
                {
                    "role": "system",
                    "content": SYSTEM_PROMPT.format(
                        source=config.source_language,
                        target=config.target_language,
                    ),
                },
                {
                    "role": "user",
                    "content": _build_user_message([t for _, t in pending]),
                },
            ],
            max_tokens=config.max_tokens,
            temperature=0.0,
            response_format={"type": "json_object"},
        )

        content = response.choices[0].message.content or ""
        translations = json.loads(content).get("translations", [])
        if len(translations) != len(pending):
            logger.warning(
                "Groq returned %d translations for %d entries, keeping originals",
                len(translations), len(pending),
            )
            return list(texts)

        result = list(texts)
        for (i, original), translated in zip(pending, translations):
            translated = str(translated).strip() if translated is not None else ""
            result[i] = translated or original
        return result

    except Exception:
        logger.warning("Groq translation failed, keeping original text", exc_info=True)
        return list(texts)


def translate_recipe(
    recipe: Recipe,
    config: TranslatorConfig = DEFAULT_TRANSLATOR_CONFIG,
) -> Recipe:
    """
    Return a copy of ``recipe`` with the ``translated_*`` fields filled in.

    Title, description, ingredient names and steps go out in one batch.
    """
    ingredients = recipe.ingredients or []
    steps = recipe.steps or []
    description = recipe.description or ""

    batch = [recipe.title or "", description, *(ing.name or "" for ing in ingredients), *steps]
    translated = translate_texts(batch, config=config)

    title, t_description = translated[0], translated[1]
    offset = 2
    t_names = translated[offset:offset + len(ingredients)]
    t_steps = translated[offset + len(ingredients):]

    update: dict = {
        "translated_title": title or recipe.title,
        "translated_description": t_description or recipe.description,
    }
    if recipe.ingredients is not None:
        update["translated_ingredients"] = [
            ing.model_copy(update={"translated_name": name or ing.name})
            for ing, name in zip(ingredients, t_names)
        ]
    if recipe.steps is not None:
        update["translated_steps"] = t_steps
    return recipe.model_copy(update=update)
