import logging
from pathlib import Path
from typing import List, Tuple

import pandas as pd

from netflix_analytics.model.title import TITLE_COLUMNS, ContentType

REQUIRED_BASE_COLS: List[str] = ["show_id", "type", "title", "release_year"]
VALID_TYPES: set[str] = {t.value for t in ContentType}


def _contract_errors(df: pd.DataFrame, name: str) -> List[str]:
    # Verstöße, bei denen kein Katalog gebaut werden kann
    errors: List[str] = []

    missing_required = sorted(set(REQUIRED_BASE_COLS).difference(df.columns))
    if missing_required:
        errors.append(f"{name}: fehlende Pflichtspalten: {', '.join(missing_required)}")

    if "show_id" in df.columns:
        null_ids = df["show_id"].isna() | (df["show_id"].astype(str) == "")
        if null_ids.any():
            errors.append(f"{name}: {int(null_ids.sum())} Zeilen ohne show_id.")
        dupes = df["show_id"].duplicated(keep=False) & ~null_ids
        if dupes.any():
            sample = ", ".join(sorted(df.loc[dupes, "show_id"].astype(str).unique())[:5])
            errors.append(
                f"{name}: {int(dupes.sum())} Zeilen mit doppelter show_id (z.B. {sample})."
            )
    return errors


def _invalid_type_mask(df: pd.DataFrame) -> pd.Series:
    if "type" not in df.columns:
        return pd.Series(False, index=df.index)
    return ~df["type"].isin(VALID_TYPES)


def _invalid_year_mask(df: pd.DataFrame) -> pd.Series:
    if "release_year" not in df.columns:
        return pd.Series(False, index=df.index)
    years = pd.to_numeric(df["release_year"], errors="coerce")
    return (years.isna() | (years % 1 != 0)).fillna(True).astype(bool)


def invalid_row_mask(df: pd.DataFrame) -> pd.Series:
    """Zeilen mit unbekanntem type oder fehlendem/nicht ganzzahligem release_year."""
    return (_invalid_type_mask(df) | _invalid_year_mask(df)).astype(bool)


def check_catalog_frame(
    df: pd.DataFrame,
    *,
    df_name: str | None = None,
    error_report_path: str | Path | None = None,
    invalid_rows_output_path: str | Path | None = None,
) -> Tuple[bool, List[str]]:
    """
    Prüft den Vertrag, den jede Analyse voraussetzt: Pflichtspalten,
    eindeutige show_id, gültiger type, ganzzahliges release_year.

    Es wird nichts bereinigt; der Aufrufer entscheidet, ob Fehler fatal sind.

    Returns:
        (ok, errors) – ok ist True, wenn keine Verletzung gefunden wurde.
    """
    name = df_name or "Katalog"
    errors: List[str] = _contract_errors(df, name)

    missing_optional = sorted(set(TITLE_COLUMNS).difference(df.columns).difference(REQUIRED_BASE_COLS))
    if missing_optional:
        errors.append(f"{name}: fehlende Spalten: {', '.join(missing_optional)}")

    bad_type = _invalid_type_mask(df)
    if bad_type.any():
        values = ", ".join(sorted(df.loc[bad_type, "type"].astype(str).unique())[:5])
        errors.append(f"{name}: {int(bad_type.sum())} Zeilen mit unbekanntem type ({values}).")

    bad_year = _invalid_year_mask(df)
    if bad_year.any():
        errors.append(
            f"{name}: {int(bad_year.sum())} Zeilen mit fehlendem oder nicht ganzzahligem release_year."
        )

    for msg in errors:
        logging.warning(msg)

    # --- Fehlerreport speichern ---
    if error_report_path and errors:
        rep_path = Path(error_report_path)
        rep_path.parent.mkdir(parents=True, exist_ok=True)
        rep_path.write_text("\n".join(errors), encoding="utf-8")
        logging.info(f"{name}: Fehlerreport gespeichert unter {rep_path}")

    invalid = bad_type | bad_year
    if invalid_rows_output_path and invalid.any():
        out_path = Path(invalid_rows_output_path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        df[invalid].to_csv(out_path, index=False)
        logging.info(f"{name}: {int(invalid.sum())} ungültige Zeilen gespeichert unter {out_path}")

    return len(errors) == 0, errors


def drop_invalid_rows(
    df: pd.DataFrame,
    *,
    df_name: str | None = None,
    error_report_path: str | Path | None = None,
    invalid_rows_output_path: str | Path | None = None,
) -> pd.DataFrame:
    """
    Prüft df und liefert die gültigen Zeilen.

    Fehlende Pflichtspalten und leere oder doppelte show_ids sind
    Vertragsfehler (ValueError). Zeilen mit ungültigem type oder
    release_year werden mit Warnung verworfen, der Rest bleibt erhalten.
    """
    name = df_name or "Katalog"
    check_catalog_frame(
        df,
        df_name=name,
        error_report_path=error_report_path,
        invalid_rows_output_path=invalid_rows_output_path,
    )
    contract = _contract_errors(df, name)
    if contract:
        joined = "\n - ".join(contract)
        raise ValueError(f"Katalog verletzt das Schema:\n - {joined}")

    invalid = invalid_row_mask(df)
    if invalid.any():
        logging.warning(
            f"{name}: {int(invalid.sum())} von {len(df)} Zeilen verworfen "
            f"(ungültiger type oder release_year)."
        )
    return df[~invalid]
