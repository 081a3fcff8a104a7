"""
Assign EEG triggers to target words (40--99) and sentences (110--253).

Numbering restarts in every list. Within a list, codes follow the order in
which each target word (or sentence) first appears, and every row with the
same target word (or sentence) gets the same code.
"""

import pandas as pd

from config import TARGET_TRIGGER_RANGE, SENTENCE_TRIGGER_RANGE
from errors import TriggerRangeError


def number_within_lists(df: pd.DataFrame, column: str, code_range: tuple) -> pd.Series:
    """Dense codes per distinct value of `column`, restarting in each list."""
    first, last = code_range
    codes = pd.Series(0, index=df.index, dtype=int)

    for list_name, group in df.groupby("list", sort=False):
        positions, _ = pd.factorize(group[column])
        group_codes = positions + first

        if len(group_codes) and group_codes.max() > last:
            raise TriggerRangeError(
                f"{list_name}: {group[column].nunique()} distinct `{column}` values "
                f"need codes up to {group_codes.max()}, but the range ends at {last}."
            )
        codes.loc[group.index] = group_codes

    return codes


def assign_triggers(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    df["target_word_trigger"] = number_within_lists(df, "target_word", TARGET_TRIGGER_RANGE)
    df["sentence_trigger"] = number_within_lists(df, "sentence", SENTENCE_TRIGGER_RANGE)
    return df
