"""End-to-end tests: item table to written lists."""

import pandas as pd
import pytest

from generate_dom_stimuli import build_stimuli, build_trials
from output import OUTPUT_COLUMNS, split_lists, write_lists
from config import CONDITION_SEQUENCE
from errors import ConfigurationError


@pytest.fixture
def english(items):
    return build_stimuli(items, "Mini-English", seed=123, materials_version="test")


class TestBuildTrials:

    def test_rows_per_list(self, items):
        trials = build_trials(items, "Mini-English")
        assert len(trials) == 18
        for _, lst in trials.groupby("list"):
            assert len(lst) == 6
            assert lst["verb_noun_ID"].is_unique

    def test_every_pair_meets_every_condition(self, items):
        trials = build_trials(items, "Mini-English")
        for _, pair in trials.groupby("verb_noun_ID"):
            assert sorted(pair["grammaticality"]) == sorted(CONDITION_SEQUENCE)

    def test_wrapup_noun_differs(self, items):
        trials = build_trials(items, "Mini-English")
        assert (trials["wrapup_noun"] != trials["noun1"]).all()

    def test_article_location_violation_fuses_in_every_language(self, items):
        for language, suffixed in [("Mini-English", False), ("Mini-Norwegian", True)]:
            trials = build_trials(items, language)
            violations = trials[trials["grammaticality"] == "article location violation"]
            for _, row in violations.iterrows():
                words = row["sentence"].rstrip(".").split(" ")
                assert row["article_noun1"] + row["noun1"] in words
                assert row["noun1"] not in words

            grammatical = trials[trials["grammaticality"] == "grammatical"]
            row = grammatical.iloc[0]
            words = row["sentence"].rstrip(".").split(" ")
            if suffixed:
                assert row["noun1"] + row["article_noun1"] in words
            else:
                assert row["noun1"] in words

    def test_target_word_after_dom_morpheme(self, items):
        trials = build_trials(items, "Mini-English")
        for _, row in trials.iterrows():
            words = row["sentence"].split(" ")
            position = int(row["target_word_location"].replace("word", ""))
            assert words[position - 1] == row["target_word"]
            if row["grammaticality"] != "DOM violation":
                assert words[position - 2] == "fi"

    def test_no_transitive_verbs(self, items):
        with pytest.raises(ConfigurationError):
            build_trials(items[items["verb_type"] != "transitive"], "Mini-English")

    def test_unknown_wrapup_format(self, items):
        items = items.replace({"wrapup_format": {"additive": "Additive"}})
        with pytest.raises(ConfigurationError, match="Additive"):
            build_trials(items, "Mini-English")


class TestBuildStimuli:

    def test_output_columns_and_blanks(self, english):
        stimuli, _ = english
        assert stimuli.columns.tolist() == OUTPUT_COLUMNS
        assert stimuli.isna().sum().sum() == 0
        assert (stimuli["word10"] == "").all()
        assert (stimuli["materials_version"] == "test").all()
        assert (stimuli["language"] == "Mini-English").all()

    def test_trigger_codes_dense_per_list(self, english):
        stimuli, _ = english
        for _, lst in stimuli.groupby("list"):
            targets = sorted(lst["target_word_trigger"].unique())
            sentences = sorted(lst["sentence_trigger"].unique())
            assert targets == list(range(40, 40 + len(targets)))
            assert sentences == list(range(110, 116))

    def test_reproducible(self, items, english):
        stimuli, _ = english
        again, _ = build_stimuli(items, "Mini-English", seed=123, materials_version="test")
        assert stimuli.to_csv(index=False) == again.to_csv(index=False)

    def test_balance_warnings_name_columns(self, english):
        _, warnings = english
        # Two masculine nouns and one feminine noun
        assert "noun1_gender" in [w.column for w in warnings]
        assert "verb" not in [w.column for w in warnings]


class TestLists:

    def test_split_lists(self, english):
        stimuli, _ = english
        tables = split_lists(stimuli)
        assert len(tables) == 3
        assert [len(t) for t in tables] == [6, 6, 6]
        assert tables[1]["list"].iloc[0].startswith("List 2")

    def test_shared_rows_in_every_list(self, english):
        stimuli, _ = english
        shared = stimuli.iloc[[0]].assign(list="", sentence="Welcome.")
        tables = split_lists(pd.concat([shared, stimuli], ignore_index=True))
        assert all((t["sentence"] == "Welcome.").sum() == 1 for t in tables)

    def test_write_lists(self, english, tmp_path):
        stimuli, _ = english
        paths = write_lists(split_lists(stimuli), tmp_path / "out", "UiT", "Mini-English")

        assert [p.name for p in paths] == [
            f"UiT site, Mini-English, Session3_Experiment_differential_object_marking, List {n}.csv"
            for n in (1, 2, 3)
        ]
        written = pd.read_csv(paths[0], dtype=str, keep_default_na=False)
        assert len(written) == 6
        assert (written["word10_duration"] == "").all()
        assert written["word1_duration"].str.isdigit().all()
