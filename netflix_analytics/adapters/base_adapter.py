import logging
from abc import ABC, abstractmethod
from typing import Any, Mapping

import pandas as pd


class BaseAdapter(ABC):
    """Gemeinsamer Ablauf extract -> transform für jede Katalogquelle."""

    name = "BaseAdapter"

    def __init__(self, source_config: Mapping[str, Any]):
        self.config = dict(source_config)

    @abstractmethod
    def extract(self) -> Any:
        """Lädt Rohdaten (ein DataFrame oder Roh-Objekte)"""

    @abstractmethod
    def transform(self, data: Any) -> pd.DataFrame:
        """Bringt die Quelldaten in die Spaltenform des Katalogs (TITLE_COLUMNS)"""

    def load_frame(self) -> pd.DataFrame:
        raw = self.extract()
        df = self.transform(raw)
        n_raw = len(raw) if hasattr(raw, "__len__") else "?"
        logging.info(f"{self.name}: {n_raw} Rohzeilen -> {len(df)} Katalogzeilen.")
        return df
