"""
Select the second noun of each trial, used in the wrap-up clause.

Every noun should appear in the wrap-up location about as often as every
other noun, and never in the same trial as itself. Trials are processed in
row order with the random generator seeded by `seed + i` (i = row number,
from 1), so a run is reproducible and rows still differ from one another.
"""

import random

import pandas as pd

from config import SEED
from errors import WrapupPoolError


class NounUsageCounter:
    """How often each noun has been used in the wrap-up location so far."""

    def __init__(self, nouns):
        self.counts = {noun: 0 for noun in nouns}

    @property
    def cap(self) -> int:
        # A noun stops being eligible once it reaches the number of nouns
        return len(self.counts)

    def eligible(self, exclude):
        """
        Nouns other than `exclude` still under the cap that share the lowest
        usage count. More used nouns are left out even when under the cap.
        """
        candidates = [
            noun for noun, count in self.counts.items()
            if noun != exclude and count < self.cap
        ]
        if not candidates:
            return []
        lowest = min(self.counts[noun] for noun in candidates)
        return [noun for noun in candidates if self.counts[noun] == lowest]

    def increment(self, noun):
        self.counts[noun] += 1

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {"noun": list(self.counts), "wrapup_noun_count": list(self.counts.values())}
        )


def pick_wrapup_noun(noun1: str, i: int, counter: NounUsageCounter, seed: int = SEED) -> str:
    """Draw the wrap-up noun for row `i` (1-based)."""
    rng = random.Random(seed + i)

    eligible = counter.eligible(exclude=noun1)
    if not eligible:
        raise WrapupPoolError(
            f"No wrap-up noun left for row {i} (noun1={noun1!r}). "
            f"The noun pool is too small for the number of trials: {counter.counts}"
        )

    return rng.choice(eligible)


def assign_wrapup_nouns(combinations: pd.DataFrame, seed: int = SEED,
                        verbose: bool = False) -> pd.DataFrame:
    """
    Add `wrapup_noun` and `wrapup_noun_gender` to every trial.

    Args:
        combinations: Output of generate_combinations
        seed: Base seed; row i uses seed + i
        verbose: Print the usage counts after every row

    Returns:
        Copy of the table with the two new columns
    """
    nouns = list(dict.fromkeys(combinations["noun1"]))
    genders = (
        combinations.drop_duplicates("noun1")
        .set_index("noun1")["noun1_gender"]
        .to_dict()
    )

    counter = NounUsageCounter(nouns)
    wrapup_nouns = []

    for i, noun1 in enumerate(combinations["noun1"], start=1):
        wrapup_noun = pick_wrapup_noun(noun1, i, counter, seed)
        counter.increment(wrapup_noun)
        wrapup_nouns.append(wrapup_noun)

        if verbose:
            print(counter.to_frame().to_string(index=False))
            print()

    result = combinations.copy()
    result["wrapup_noun"] = wrapup_nouns
    result["wrapup_noun_gender"] = [genders[noun] for noun in wrapup_nouns]

    return result
