# netflix_analytics/transform/aggregate.py

import logging
from typing import Callable, Mapping, Sequence

import pandas as pd

ID_COL = "show_id"
TIE_POLICIES = ("dense", "min")

RowFilter = Callable[[pd.DataFrame], pd.Series]


def _as_list(cols: str | Sequence[str] | None) -> list[str]:
    if cols is None:
        return []
    if isinstance(cols, str):
        return [cols]
    return list(cols)


def _require_columns(df: pd.DataFrame, cols: Sequence[str], role: str) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise KeyError(f"{role}: Spalte(n) nicht vorhanden: {', '.join(missing)}")


def count_distinct(
    df: pd.DataFrame,
    by: str | Sequence[str],
    *,
    name: str = "total_titles",
    id_col: str = ID_COL,
    filters: Mapping[str, RowFilter] | None = None,
    sort: bool = True,
) -> pd.DataFrame:
    """
    Gruppiert nach `by` und zählt verschiedene show_ids pro Gruppe.

    Args:
        df: Eingabe (roh, angereichert oder explodiert).
        by: Gruppierungsschlüssel. Zeilen mit fehlendem Schlüssel fallen weg.
        name: Name der Gesamtzählspalte.
        id_col: Spalte, deren verschiedene Werte gezählt werden.
        filters: Zusätzliche gefilterte Zählungen, {spaltenname: prädikat}.
                 Das Prädikat bekommt den DataFrame und liefert eine Bool-Maske.
                 Gruppen ohne Treffer erhalten 0.
        sort: Absteigend nach `name`, Gleichstand aufsteigend nach Schlüssel.

    Returns:
        DataFrame mit den Schlüsselspalten, `name` und je einer Spalte pro Filter.
    """
    keys = _as_list(by)
    if not keys:
        raise ValueError("count_distinct: mindestens ein Gruppierungsschlüssel nötig.")
    _require_columns(df, keys + [id_col], "count_distinct")

    base = df.dropna(subset=keys)
    counts = base.groupby(keys, sort=False)[id_col].nunique().rename(name)

    result = counts.to_frame()
    for col, predicate in (filters or {}).items():
        mask = predicate(base).fillna(False).astype(bool)
        filtered = base[mask].groupby(keys, sort=False)[id_col].nunique()
        result[col] = filtered.reindex(result.index, fill_value=0).astype("int64")

    result = result.reset_index()
    result[name] = result[name].astype("int64")
    if sort:
        result = result.sort_values(
            [name] + keys, ascending=[False] + [True] * len(keys), kind="mergesort"
        ).reset_index(drop=True)
    logging.debug(f"count_distinct: {len(result)} Gruppen für Schlüssel {keys}.")
    return result


def percent_of_total(counts: pd.Series | int | float, total: int | float, decimals: int = 2):
    """count * 100.0 / total, gerundet. total == 0 ergibt 0.0."""
    if not total:
        if isinstance(counts, pd.Series):
            return pd.Series(0.0, index=counts.index)
        return 0.0
    share = counts * 100.0 / total
    if isinstance(share, pd.Series):
        return share.astype(float).round(decimals)
    return round(float(share), decimals)


def rank_within(
    df: pd.DataFrame,
    order_by: str,
    *,
    partition_by: str | Sequence[str] | None = None,
    ascending: bool = False,
    method: str = "dense",
) -> pd.Series:
    """
    Rang jeder Zeile nach `order_by`, optional pro Partition.

    Höchster Wert = Rang 1 (bei ascending=False). Gleichstand teilt den Rang.
    method='dense' zählt lückenlos weiter, method='min' entspricht SQL RANK()
    (der nächste Rang springt um die Größe der Gleichstandsgruppe).
    """
    if method not in TIE_POLICIES:
        raise ValueError(f"Unbekannte Gleichstand-Regel: {method!r} (erlaubt: {TIE_POLICIES})")
    partitions = _as_list(partition_by)
    _require_columns(df, [order_by], "rank_within (order_by)")
    _require_columns(df, partitions, "rank_within (partition_by)")

    if partitions:
        ranks = df.groupby(partitions, sort=False, dropna=False)[order_by].rank(
            method=method, ascending=ascending
        )
    else:
        ranks = df[order_by].rank(method=method, ascending=ascending)
    return ranks.astype("Int64")


def top_n(
    df: pd.DataFrame,
    n: int,
    order_by: str,
    *,
    partition_by: str | Sequence[str] | None = None,
    method: str = "min",
    rank_col: str | None = None,
    tie_break: str | Sequence[str] | None = None,
) -> pd.DataFrame:
    """
    Auswahl "Rang <= n" (nicht "Zeile <= n"): Gleichstände an der Grenze
    werden vollständig übernommen, das Ergebnis kann also mehr als n Zeilen
    haben.

    Args:
        df: Eingabe, typischerweise Ergebnis von count_distinct.
        n: Ganzzahl >= 1.
        order_by: Kennzahl, absteigend gerankt.
        partition_by: Optionaler Partitionsschlüssel (Rang pro Partition).
        method: Gleichstand-Regel, 'min' (SQL RANK) oder 'dense'.
        rank_col: Wenn gesetzt, wird der Rang unter diesem Namen ausgegeben.
        tie_break: Sortierschlüssel innerhalb gleicher Ränge (deterministische Ausgabe).

    Returns:
        Gefilterter DataFrame, sortiert nach Partition, Rang, tie_break.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError(f"top_n: n muss eine ganze Zahl sein, erhalten: {n!r}")
    if n < 1:
        raise ValueError(f"top_n: n muss >= 1 sein, erhalten: {n}")
    partitions = _as_list(partition_by)
    extra = _as_list(tie_break)
    _require_columns(df, extra, "top_n (tie_break)")

    ranks = rank_within(df, order_by, partition_by=partitions, method=method)
    col = rank_col or "_rank"
    out = df.assign(**{col: ranks})
    # fehlende Kennzahl -> kein Rang -> nicht ausgewählt
    out = out[out[col].le(n).fillna(False).astype(bool)]
    out = out.sort_values(partitions + [col] + extra, kind="mergesort").reset_index(drop=True)
    if rank_col is None:
        out = out.drop(columns=[col])
    return out
