"""
Counterbalance grammaticality conditions across three lists.

Following González Alonso et al. (2020), each list rotates the condition
sequence by one position:

    List 1: grammatical, DOM violation, article location violation
    List 2: DOM violation, article location violation, grammatical
    List 3: article location violation, grammatical, DOM violation

Every verb-noun combination appears once in each list and meets every
condition exactly once across the three lists. The lists are administered
to different participants.
"""

import random

import pandas as pd

from config import (
    SEED, CONDITION_SEQUENCE, CONDITION_TRIGGERS, GRAMMATICAL,
    GRAMMATICAL_RESPONSE, UNGRAMMATICAL_RESPONSE, GRAMMATICAL_PROPERTY,
    GRAMMATICAL_PROPERTY_TRIGGER, SESSION_LABEL, NUMBER, WRAPUP_FORMATS
)
from errors import ConditionTilingError, ConfigurationError, MissingLexicalItemError


def rotate(sequence: list, k: int) -> list:
    """Rotate left by k positions."""
    k = k % len(sequence)
    return sequence[k:] + sequence[:k]


def list_name(number: int, sequence: list) -> str:
    return f"List {number}: " + ", ".join(sequence)


def tile_conditions(n_rows: int, sequence: list) -> list:
    if n_rows % len(sequence) != 0:
        raise ConditionTilingError(
            f"{n_rows} trials cannot be split evenly over {len(sequence)} conditions."
        )
    return sequence * (n_rows // len(sequence))


def permute_conditions(combinations: pd.DataFrame,
                       sequence: list = CONDITION_SEQUENCE) -> pd.DataFrame:
    """
    Stack one copy of the trials per list, each with a rotated condition
    sequence, and add the response and trigger metadata.
    """
    lists = []

    for k in range(len(sequence)):
        rotated = rotate(sequence, k)
        lst = combinations.copy()
        lst["list"] = list_name(k + 1, rotated)
        lst["grammaticality"] = tile_conditions(len(lst), rotated)
        lists.append(lst)

    df = pd.concat(lists, ignore_index=True)

    df["correct_response"] = df["grammaticality"].map(
        lambda g: GRAMMATICAL_RESPONSE if g == GRAMMATICAL else UNGRAMMATICAL_RESPONSE
    )
    df["grammatical_property"] = GRAMMATICAL_PROPERTY
    df["grammatical_property_trigger"] = GRAMMATICAL_PROPERTY_TRIGGER
    df["grammaticality_trigger"] = df["grammaticality"].map(CONDITION_TRIGGERS)
    df["session"] = SESSION_LABEL

    return df


def balanced_draw(pool: list, n: int, rng: random.Random) -> list:
    """n items from pool, reshuffling the whole pool each time it runs out."""
    drawn = []
    while len(drawn) < n:
        batch = list(pool)
        rng.shuffle(batch)
        drawn.extend(batch)
    return drawn[:n]


def round_robin(pool: list, n: int) -> list:
    return [pool[i % len(pool)] for i in range(n)]


def assign_persons_and_formats(df: pd.DataFrame, persons: list, formats: list,
                               seed: int = SEED) -> pd.DataFrame:
    """
    Add the subject (`person`) and the wrap-up clause format of each trial.

    Both are distributed within lists and within verbs. Persons are drawn
    with a generator seeded once with `seed`, separate from the wrap-up noun
    draws. All trials are singular.
    """
    if not persons:
        raise MissingLexicalItemError("No persons found in the item table.")
    if not formats:
        raise MissingLexicalItemError("No wrap-up formats found in the item table.")

    unknown = [f for f in dict.fromkeys(formats) if f not in WRAPUP_FORMATS]
    if unknown:
        raise ConfigurationError(
            f"Unknown wrap-up formats {unknown} in the item table, expected one of {WRAPUP_FORMATS}."
        )

    rng = random.Random(seed)
    groups = []

    for _, group in df.groupby(["list", "verb"], sort=False):
        group = group.copy()
        group["person"] = balanced_draw(persons, len(group), rng)
        group["wrapup_format"] = round_robin(formats, len(group))
        groups.append(group)

    result = pd.concat(groups).sort_index() if groups else df.assign(person="", wrapup_format="")
    result["number"] = NUMBER

    return result
