import re

import pandas as pd
from unidecode import unidecode


def normalize_search_text(text: str, *, fold_accents: bool = False) -> str:
	if not isinstance(text, str):
		return ""
	t = text
	# 1) optional: Akzente entfernen ("Penélope" -> "Penelope")
	if fold_accents:
		t = unidecode(t)
	# 2) lower
	t = t.lower()
	# 3) Spaces kollabieren
	t = re.sub(r"\s+", " ", t)
	return t


def contains_text(series: pd.Series, term: str, *, fold_accents: bool = False) -> pd.Series:
	"""
	ILIKE '%term%': Teilstring ohne Groß-/Kleinschreibung.
	Fehlende Werte ergeben False.
	"""
	if not isinstance(term, str) or not term.strip():
		raise ValueError(f"Suchbegriff darf nicht leer sein: {term!r}")
	needle = normalize_search_text(term, fold_accents=fold_accents)
	haystack = series.map(lambda v: normalize_search_text(v, fold_accents=fold_accents)).astype(str)
	return haystack.str.contains(needle, regex=False).fillna(False).astype(bool)
