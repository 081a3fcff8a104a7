"""
Check that key stimuli appear equally often.

Certain stimuli should appear equally often to prevent repetition effects.
This basic check only catches blatant disparities; it does not verify every
control applied while building the lists.
"""

import logging
from dataclasses import dataclass

import pandas as pd
from scipy import stats

from config import BALANCE_COLUMNS
from lexicon import filled

logger = logging.getLogger(__name__)


@dataclass
class BalanceWarning:
    column: str
    counts: dict
    p_value: float

    @property
    def message(self) -> str:
        return f"Some elements in the column `{self.column}` appear more often than others."


def value_counts(df: pd.DataFrame, column: str) -> pd.Series:
    values = df[column][filled(df[column])]
    return values.value_counts(sort=False)


def check_balance(df: pd.DataFrame, columns=BALANCE_COLUMNS) -> list:
    """
    Return a BalanceWarning for every column whose values are not equally
    frequent. Missing columns are skipped.
    """
    warnings = []

    for column in columns:
        if column not in df.columns:
            continue

        counts = value_counts(df, column)
        if counts.nunique() <= 1:
            continue

        p_value = float(stats.chisquare(counts.to_numpy()).pvalue)
        warning = BalanceWarning(column, counts.to_dict(), p_value)
        logger.warning("%s (chi-square p = %.3f)", warning.message, p_value)
        warnings.append(warning)

    return warnings
