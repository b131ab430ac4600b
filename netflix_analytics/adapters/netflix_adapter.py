# netflix_analytics/adapters/netflix_adapter.py
import logging

import pandas as pd

from netflix_analytics.adapters.base_adapter import BaseAdapter
from netflix_analytics.model.title import TITLE_COLUMNS

# Spaltennamen im Kaggle-Export -> Katalogspalten
COLUMN_ALIASES: dict[str, str] = {
    "cast": "casts",
}


class NetflixCsvAdapter(BaseAdapter):
    """Netflix-Titel-Export (CSV) -> Katalog-DataFrame.

    • alle Textspalten bleiben Rohstrings (keine Bereinigung)
    • 'cast' wird zu 'casts'
    • release_year -> Int64 (nicht numerisch -> NA, meldet der Schema-Check)
    • fehlende optionale Spalten werden leer ergänzt
    """

    name = "NetflixCsvAdapter"

    # ------------------------------------------------------------ #
    # 1) Extract                                                   #
    # ------------------------------------------------------------ #
    def extract(self) -> pd.DataFrame:  # type: ignore[override]
        path = self.config["file_path"]
        encoding = self.config.get("encoding", "utf-8")
        logging.info(f"{self.name}: lese {path}")
        return pd.read_csv(path, dtype=str, encoding=encoding)

    # ------------------------------------------------------------ #
    # 2) Transform                                                 #
    # ------------------------------------------------------------ #
    def transform(self, df: pd.DataFrame) -> pd.DataFrame:  # type: ignore[override]
        df = df.copy()
        df.columns = [str(c).strip() for c in df.columns]
        df = df.rename(columns=COLUMN_ALIASES)

        for col in TITLE_COLUMNS:
            if col not in df.columns:
                logging.warning(f"{self.name}: Spalte '{col}' fehlt, wird leer ergänzt.")
                df[col] = None

        df["release_year"] = pd.to_numeric(df["release_year"], errors="coerce").astype("Int64")

        extra = [c for c in df.columns if c not in TITLE_COLUMNS]
        if extra:
            logging.debug(f"{self.name}: zusätzliche Spalten ignoriert: {extra}")
        return df[TITLE_COLUMNS].reset_index(drop=True)
