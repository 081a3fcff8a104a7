"""
Combine every transitive verb with every noun.

Each verb-noun combination is one trial. The noun is stored as `noun1`
because a second noun is added later for the wrap-up clause.
"""

import pandas as pd

from errors import ConfigurationError
from lexicon import filled


VERB_COLUMNS = ["verb_ID", "verb", "verb_contrast_ID"]
NOUN_COLUMNS = ["noun_ID", "unprocessed_noun", "noun", "gender"]

NOUN1_NAMES = {
    "noun_ID": "noun1_ID",
    "unprocessed_noun": "unprocessed_noun1",
    "noun": "noun1",
    "gender": "noun1_gender"
}


def _complete(df: pd.DataFrame, column: str) -> pd.DataFrame:
    return df[filled(df[column])]


def generate_combinations(items: pd.DataFrame) -> pd.DataFrame:
    """
    Cross every transitive verb with every noun.

    Rows are verb-major, both sides in item-table order. Verbs or nouns
    without an ID are dropped.

    Raises ConfigurationError when no transitive verb or no noun is left.
    """
    verbs = items[items["verb_type"] == "transitive"][VERB_COLUMNS]
    verbs = _complete(verbs, "verb_ID").drop_duplicates()

    nouns = _complete(items[NOUN_COLUMNS], "noun_ID").drop_duplicates()

    if verbs.empty:
        raise ConfigurationError("No transitive verbs found in the item table.")
    if nouns.empty:
        raise ConfigurationError("No nouns found in the item table.")

    combinations = (
        verbs.merge(nouns, how="cross")
        .rename(columns=NOUN1_NAMES)
        .reset_index(drop=True)
    )

    combinations["verb_noun_ID"] = (
        combinations["verb_ID"] + "_" + combinations["noun1_ID"]
    )

    return combinations
