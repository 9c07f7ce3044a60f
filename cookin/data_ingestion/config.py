"""
Data ingestion package for the COOKIN recipe service.

Responsibility:
- Read a raw food-safety-korea (COOKRCP01) recipe dump.
- Normalize it into the canonical Recipe schema.
- Persist a cleaned catalog locally for the recipe data store.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class IngestionConfig:
    """
    Configuration for the catalog ingestion pipeline.
    """

    raw_path: Path = Path("cookin/data/raw/COOKRCP01.json")
    processed_data_dir: Path = Path("cookin/data/processed")
    processed_filename: str = "recipes.json"
    max_steps: int = 20

    @property
    def processed_path(self) -> Path:
        return self.processed_data_dir / self.processed_filename


DEFAULT_INGESTION_CONFIG = IngestionConfig()
