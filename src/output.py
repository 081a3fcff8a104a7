"""
Shape the final table and save one CSV per list.
"""

from pathlib import Path

import pandas as pd

from config import MAX_WORDS

TASK_NAME = "Session3_Experiment_differential_object_marking"

OUTPUT_COLUMNS = [
    "materials_version", "language", "list", "number", "verb_noun_ID",
    "grammaticality", "correct_response", "grammatical_property",
    "grammatical_property_trigger", "grammaticality_trigger", "sentence",
    "sentence_trigger", "session", "target_word_location", "target_word_trigger",
    "target_word",
] + [
    column for n in range(1, MAX_WORDS + 1)
    for column in (f"word{n}", f"word{n}_duration")
]


def shape_output(df: pd.DataFrame, language: str, materials_version: str) -> pd.DataFrame:
    """Keep the columns needed for presentation, with blanks for missing values."""
    df = df.assign(materials_version=materials_version, language=language)
    df = df[OUTPUT_COLUMNS].astype(object)
    return df.where(df.notna(), "").reset_index(drop=True)


def split_lists(df: pd.DataFrame) -> list:
    """One table per list; rows without a list go into every table."""
    shared = df["list"] == ""
    names = [name for name in df["list"].unique() if name != ""]
    return [df[(df["list"] == name) | shared].reset_index(drop=True) for name in names]


def list_filename(study_site: str, language: str, number: int) -> str:
    return f"{study_site} site, {language}, {TASK_NAME}, List {number}.csv"


def write_lists(tables: list, output_dir, study_site: str, language: str) -> list:
    """Write each list table as UTF-8 CSV and return the paths."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    paths = []
    for number, table in enumerate(tables, start=1):
        path = output_dir / list_filename(study_site, language, number)
        table.to_csv(path, index=False, encoding="utf-8")
        paths.append(path)

    return paths
