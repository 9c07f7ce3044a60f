from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, List

import pandas as pd

from .config import DEFAULT_INGESTION_CONFIG, IngestionConfig

logger = logging.getLogger(__name__)

CANONICAL_COLUMNS: List[str] = [
    "id",
    "title",
    "translatedTitle",
    "description",
    "translatedDescription",
    "imageUrl",
    "ingredients",
    "translatedIngredients",
    "steps",
    "translatedSteps",
    "recipeType",
    "category",
    "recipeMethod",
    "calories",
    "weight",
]

_PART_SEPARATORS = re.compile(r"[,;\n\r]+")
_PARENTHESIZED = re.compile(r"\([^)]*\)")
_QUANTITY = re.compile(r"\d+[^\W\d_]*")

DEFAULT_TITLE = "레시피"


class IngestionError(RuntimeError):
    """The raw dump is unusable (wrong shape or an API error block)."""


def _parse_ingredients(parts_text: Any) -> list[dict[str, str]]:
    """
    Split an RCP_PARTS_DTLS blob into ingredient records.

    "두부 100g, 대파(흰부분) 1/2대" -> names "두부", "대파"; the raw part is
    kept as ``originalName``.
    """
    if not isinstance(parts_text, str) or not parts_text.strip():
        return []
    ingredients = []
    for part in _PART_SEPARATORS.split(parts_text):
        part = part.strip()
        if not part:
            continue
        clean = _QUANTITY.sub("", _PARENTHESIZED.sub("", part)).strip(" /")
        ingredients.append({
            "name": clean or part,
            "originalName": part,
            "amount": "",
            "unit": "",
        })
    return ingredients


def _collect_steps(row: pd.Series, max_steps: int) -> list[str]:
    steps = []
    for i in range(1, max_steps + 1):
        value = row.get(f"MANUAL{i:02d}")
        if isinstance(value, str) and value.strip():
            steps.append(value.strip())
    return steps


def _text(value: Any, default: str = "") -> str:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return default
    return str(value).strip() or default


def load_raw_rows(path: Path) -> pd.DataFrame:
    """Read the COOKRCP01 envelope and return its rows as a DataFrame."""
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    block = payload.get("COOKRCP01") if isinstance(payload, dict) else None
    if not block:
        raise IngestionError("Raw dump has no COOKRCP01 block")

    result = block.get("RESULT") or {}
    if result.get("CODE") and result["CODE"] != "INFO-000":
        raise IngestionError(result.get("MSG") or f"API error {result['CODE']}")

    rows = block.get("row") or []
    if not isinstance(rows, list):
        raise IngestionError("COOKRCP01.row is not a list")
    return pd.DataFrame(rows)


def run_ingestion(config: IngestionConfig = DEFAULT_INGESTION_CONFIG) -> Path:
    """
    Execute the catalog ingestion pipeline.

    Steps:
    - Load the raw COOKRCP01 dump.
    - Map raw fields into the canonical Recipe schema.
    - Persist the cleaned catalog as JSON records for the data store.
    """
    config.processed_data_dir.mkdir(parents=True, exist_ok=True)

    df = load_raw_rows(config.raw_path)

    canonical = pd.DataFrame(index=df.index)
    if df.empty:
        canonical = pd.DataFrame(columns=CANONICAL_COLUMNS)
    else:
        def col(name: str) -> pd.Series:
            return df[name] if name in df.columns else pd.Series([None] * len(df), index=df.index)

        canonical["id"] = col("RCP_SEQ").apply(_text)
        canonical["title"] = col("RCP_NM").apply(lambda v: _text(v, DEFAULT_TITLE))
        canonical["translatedTitle"] = canonical["title"]
        canonical["description"] = col("HASH_TAG").apply(_text)
        canonical["translatedDescription"] = canonical["description"]
        canonical["imageUrl"] = [
            _text(mk) or _text(main)
            for mk, main in zip(col("ATT_FILE_NO_MK"), col("ATT_FILE_NO_MAIN"))
        ]
        canonical["ingredients"] = col("RCP_PARTS_DTLS").apply(_parse_ingredients)
        # Korean source records are already in the display language.
        canonical["translatedIngredients"] = canonical["ingredients"]
        canonical["steps"] = df.apply(_collect_steps, axis=1, max_steps=config.max_steps)
        canonical["translatedSteps"] = canonical["steps"]
        canonical["recipeType"] = "korean"
        canonical["category"] = col("RCP_PAT2").apply(_text)
        canonical["recipeMethod"] = col("RCP_WAY2").apply(_text)
        canonical["calories"] = pd.to_numeric(col("INFO_ENG"), errors="coerce")
        canonical["weight"] = col("INFO_WGT").apply(_text)

        canonical = canonical[canonical["id"] != ""]
        canonical = canonical[CANONICAL_COLUMNS]

    output_path = config.processed_path
    canonical.to_json(output_path, orient="records", force_ascii=False, indent=2)
    logger.info("Wrote %d recipes to %s", len(canonical), output_path)
    return output_path


if __name__ == "__main__":
    path = run_ingestion()
    print(f"Ingestion complete. Processed data saved to: {path}")
