"""
Generate the differential object marking stimuli administered in Session 3.

Target trials contain the grammatical property of interest.
Example structure: 'Amelia chose fi ze truck and fi je street too'

There are three conditions, inspired by González Alonso et al. (2020;
https://doi.org/10.1016/j.jneuroling.2020.100939):

1. grammatical
2. DOM violation (object noun without DOM)
3. article location violation (article and noun in one word)

All determiner phrases are singular, because plural objects would require
verb-object number agreement, which is not introduced until Session 4.
"""

import logging
from pathlib import Path

import pandas as pd

from config import (
    SEED, LANGUAGES, LEXICON_PATH, OUTPUT_DIR, STUDY_SITE, MATERIALS_VERSION
)
from lexicon import Lexicon, load_lexicon, select_items
from combinations import generate_combinations
from wrapup_nouns import assign_wrapup_nouns
from conditions import permute_conditions, assign_persons_and_formats
from sentences import compose_sentences
from triggers import assign_triggers
from durations import split_words, assign_durations
from balance import check_balance
from output import shape_output, split_lists, write_lists


# =============================================================================
# PIPELINE
# =============================================================================

def build_trials(items: pd.DataFrame, language: str, seed: int = SEED,
                 verbose: bool = False) -> pd.DataFrame:
    """
    Run every stage up to word timing and return the full working table.

    Columns used by the balance check (noun1, person, ...) are still present.
    """
    selected = select_items(items, language)
    lexicon = Lexicon(selected)

    trials = generate_combinations(selected)
    trials = assign_wrapup_nouns(trials, seed=seed, verbose=verbose)
    trials = permute_conditions(trials)
    trials = assign_persons_and_formats(
        trials, lexicon.persons(), lexicon.wrapup_formats(), seed=seed
    )
    trials = compose_sentences(trials, lexicon, language)
    trials = assign_triggers(trials)
    trials = split_words(trials)
    trials = assign_durations(trials)

    return trials


def build_stimuli(items: pd.DataFrame, language: str, seed: int = SEED,
                  materials_version: str = MATERIALS_VERSION,
                  verbose: bool = False):
    """
    Build the stimulus table of one language.

    Returns:
        (output table, list of BalanceWarning)
    """
    trials = build_trials(items, language, seed=seed, verbose=verbose)
    warnings = check_balance(trials)
    return shape_output(trials, language, materials_version), warnings


# =============================================================================
# MAIN
# =============================================================================

def main():
    """Generate and save the stimulus lists of every language."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    items = load_lexicon(LEXICON_PATH)

    print("=" * 70)
    print("GENERATING DIFFERENTIAL OBJECT MARKING STIMULI (SESSION 3)")
    print("=" * 70)
    print(f"Item table: {LEXICON_PATH} ({len(items)} rows)")
    print(f"Study site: {STUDY_SITE}")
    print(f"Languages: {LANGUAGES}")
    print(f"Seed: {SEED}")

    for language in LANGUAGES:
        stimuli, warnings = build_stimuli(items, language)
        tables = split_lists(stimuli)
        paths = write_lists(tables, OUTPUT_DIR, STUDY_SITE, language)

        print("\n" + "-" * 70)
        print(language)
        print("-" * 70)

        for table, path in zip(tables, paths):
            print(f"{table['list'].iloc[0]}: {len(table)} trials")
            print(f"  Saved to: {path}")

        print("\nExamples:")
        for _, row in stimuli.drop_duplicates("grammaticality").iterrows():
            print(f"  [{row['grammaticality']}] {row['sentence']} "
                  f"(target: {row['target_word']}, {row['target_word_location']})")

        if warnings:
            print(f"\n  WARNING: {len(warnings)} unbalanced column(s): "
                  f"{', '.join(w.column for w in warnings)}")
        else:
            print("\n✓ All checked columns are balanced")

    print(f"\nOutput directory: {Path(OUTPUT_DIR)}")


if __name__ == "__main__":
    main()
