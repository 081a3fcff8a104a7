"""
Split sentences into word slots and set the presentation time of each word.

Word duration is adjusted to the number of letters, since large differences
in length could raise the cognitive load and interfere with the P300:

    three letters or fewer:  250 ms
    more than three letters: 250 ms + 35 ms per extra letter

The trigger sent at the onset of the target word extends that word on
screen, so its duration is shortened by the trigger lag (40 ms).
"""

import numpy as np
import pandas as pd

from config import BASE_DURATION, BASE_LENGTH, LETTER_INCREASE, TRIGGER_LAG, MAX_WORDS
from errors import ConfigurationError

TARGET_SLOTS = ("word3", "word4")


def word_duration(word: str) -> int:
    """Duration in ms for a word of this length."""
    return BASE_DURATION + max(len(word) - BASE_LENGTH, 0) * LETTER_INCREASE


def split_words(df: pd.DataFrame) -> pd.DataFrame:
    """Add word1..word10, blank where the sentence is shorter."""
    df = df.copy()
    words = df["sentence"].str.split(" ")

    too_long = words.map(len) > MAX_WORDS
    if too_long.any():
        raise ConfigurationError(
            f"Sentences longer than {MAX_WORDS} words: "
            f"{df.loc[too_long, 'sentence'].tolist()}"
        )

    for n in range(1, MAX_WORDS + 1):
        df[f"word{n}"] = words.map(lambda w, n=n: w[n - 1] if len(w) >= n else "")

    return df


def assign_durations(df: pd.DataFrame) -> pd.DataFrame:
    """Add word1_duration..word10_duration, with the trigger lag applied."""
    bad_targets = ~df["target_word_location"].isin(TARGET_SLOTS)
    if bad_targets.any():
        raise ConfigurationError(
            f"Target words can only be in {TARGET_SLOTS}, found "
            f"{sorted(df.loc[bad_targets, 'target_word_location'].unique())}"
        )

    df = df.copy()

    for n in range(1, MAX_WORDS + 1):
        slot = f"word{n}"
        durations = df[slot].map(lambda w: word_duration(w) if w else np.nan)
        lag = np.where(df["target_word_location"] == slot, TRIGGER_LAG, 0)
        df[f"{slot}_duration"] = (durations - lag).astype("Int64")

    return df
