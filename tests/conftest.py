"""Shared test fixtures for the stimulus generator."""

import pandas as pd
import pytest

from combinations import generate_combinations
from lexicon import select_items

ITEM_COLUMNS = [
    "language", "Session_2", "Session_3", "verb_ID", "verb", "verb_type",
    "verb_contrast_ID", "noun_ID", "unprocessed_noun", "noun", "gender",
    "number", "person", "article", "conjunction", "wrapup_adverb",
    "wrapup_format", "DOM_morpheme",
]


def make_items(rows):
    """Item table from partial rows; unset cells are blank."""
    full = [
        {column: "" for column in ITEM_COLUMNS} | {"Session_3": "included"} | row
        for row in rows
    ]
    return pd.DataFrame(full, columns=ITEM_COLUMNS)


def verb(verb_id, form, verb_type="transitive"):
    return {"language": "both", "verb_ID": verb_id, "verb": form,
            "verb_type": verb_type, "verb_contrast_ID": f"c{verb_id}"}


def noun(noun_id, form, gender, session_2="included"):
    return {"language": "both", "Session_2": session_2, "noun_ID": noun_id,
            "unprocessed_noun": form, "noun": form, "gender": gender}


def function_words(language, articles, connectives, adverbs):
    rows = [
        {"language": language, "article": article, "gender": gender, "number": number}
        for (gender, number), article in articles.items()
    ]
    rows += [
        {"language": language, "conjunction": word, "wrapup_format": fmt}
        for fmt, word in connectives.items()
    ]
    rows += [
        {"language": language, "wrapup_adverb": word, "wrapup_format": fmt}
        for fmt, word in adverbs.items()
    ]
    return rows


@pytest.fixture
def items():
    """2 verbs x 3 nouns, 2 persons, 2 wrap-up formats, two languages."""
    rows = [
        verb("v1", "chose"),
        verb("v2", "found"),
        verb("v3", "slept", verb_type="intransitive"),
        noun("n1", "truck", "masculine"),
        noun("n2", "street", "feminine"),
        noun("n3", "house", "masculine"),
        noun("n4", "garden", "masculine", session_2="excluded"),
        {"language": "both", "person": "Amelia"},
        {"language": "both", "person": "Oliver"},
        {"language": "both", "DOM_morpheme": "fi"},
    ]
    rows += function_words(
        "Mini-English",
        {("masculine", "singular"): "ze", ("feminine", "singular"): "je",
         ("masculine", "plural"): "zes"},
        {"additive": "and", "adversative": "but"},
        {"additive": "too", "adversative": "not"},
    )
    rows += function_words(
        "Mini-Norwegian",
        {("masculine", "singular"): "en", ("feminine", "singular"): "a"},
        {"additive": "og", "adversative": "men"},
        {"additive": "også", "adversative": "ikke"},
    )
    return make_items(rows)


@pytest.fixture
def english_items(items):
    return select_items(items, "Mini-English")


@pytest.fixture
def base_trials(english_items):
    return generate_combinations(english_items)
