"""
Lexical item table: loading, session/language selection and lookups.

The item table has one row per vocabulary entry. A row fills only the
columns of its category (a verb row has `verb_ID`, `verb`, `verb_type`...,
an article row has `article`, `gender`, `number`), so blank cells are the
norm and are read as empty strings rather than NaN.
"""

from pathlib import Path

import pandas as pd

from config import (
    SESSION_COLUMN, NOUN_SESSION_COLUMN, INCLUDED, SHARED_LANGUAGE
)
from errors import MissingLexicalItemError, AmbiguousLexicalItemError


def is_blank(value) -> bool:
    """True for '', None and NaN."""
    if value is None:
        return True
    if isinstance(value, float) and pd.isna(value):
        return True
    return str(value).strip() == ""


def filled(values: pd.Series) -> pd.Series:
    """Boolean mask of non-blank cells, also for an empty column."""
    return ~values.map(is_blank).astype(bool)


def load_lexicon(path) -> pd.DataFrame:
    """Load the item table with every cell as a string."""
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"No item table found at {path}.")

    return pd.read_csv(path, dtype=str, keep_default_na=False, encoding="utf-8")


def select_items(items: pd.DataFrame, language: str,
                 session: str = SESSION_COLUMN,
                 noun_session: str = NOUN_SESSION_COLUMN) -> pd.DataFrame:
    """
    Keep the items of one language that are included in the session.

    Nouns are rotated across sessions: only the nouns that were included in
    `noun_session` are used in `session`.
    """
    in_language = items["language"].isin([language, SHARED_LANGUAGE])
    in_session = items[session] == INCLUDED
    is_noun = filled(items["noun"])
    rotated_out = is_noun & (items[noun_session] != INCLUDED)

    return items[in_language & in_session & ~rotated_out].reset_index(drop=True)


class Lexicon:
    """Lookups of function words and pools over a selected item table."""

    def __init__(self, items: pd.DataFrame):
        self.items = items

    def _values(self, column, **filters):
        rows = self.items[filled(self.items[column])]
        for key, value in filters.items():
            rows = rows[rows[key] == value]
        return list(dict.fromkeys(rows[column]))

    def _single(self, column, **filters):
        values = self._values(column, **filters)
        where = ", ".join(f"{k}={v!r}" for k, v in filters.items()) or "any"

        if not values:
            raise MissingLexicalItemError(f"No `{column}` found for {where}.")
        if len(values) > 1:
            raise AmbiguousLexicalItemError(
                f"Several `{column}` values found for {where}: {values}"
            )
        return values[0]

    def article(self, gender, number):
        return self._single("article", gender=gender, number=number)

    def connective(self, wrapup_format):
        return self._single("conjunction", wrapup_format=wrapup_format)

    def wrapup_adverb(self, wrapup_format):
        return self._single("wrapup_adverb", wrapup_format=wrapup_format)

    def dom_morpheme(self):
        return self._single("DOM_morpheme")

    def persons(self) -> list:
        return self._values("person")

    def wrapup_formats(self) -> list:
        """Formats in table order, e.g. ['additive', 'adversative']."""
        return self._values("wrapup_format")
