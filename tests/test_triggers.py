"""Tests for EEG trigger numbering."""

import pandas as pd
import pytest

from errors import TriggerRangeError
from triggers import assign_triggers, number_within_lists


@pytest.fixture
def table():
    return pd.DataFrame({
        "list": ["L1", "L1", "L1", "L2", "L2", "L2"],
        "target_word": ["ze", "je", "ze", "zetruck", "ze", "zetruck"],
        "sentence": ["A.", "B.", "C.", "A.", "A.", "B."],
    })


class TestAssignTriggers:

    def test_first_occurrence_order(self, table):
        result = assign_triggers(table)
        assert result["target_word_trigger"].tolist() == [40, 41, 40, 40, 41, 40]
        assert result["sentence_trigger"].tolist() == [110, 111, 112, 110, 110, 111]

    def test_dense_within_each_list(self, table):
        result = assign_triggers(table)
        for _, lst in result.groupby("list"):
            targets = sorted(lst["target_word_trigger"].unique())
            sentences = sorted(lst["sentence_trigger"].unique())
            assert targets == list(range(40, 40 + len(targets)))
            assert sentences == list(range(110, 110 + len(sentences)))

    def test_rows_and_input_unchanged(self, table):
        result = assign_triggers(table)
        assert result["sentence"].tolist() == table["sentence"].tolist()
        assert "sentence_trigger" not in table.columns


class TestRange:

    def test_last_code_in_range(self):
        df = pd.DataFrame({"list": "L1", "target_word": [f"w{i}" for i in range(60)]})
        codes = number_within_lists(df, "target_word", (40, 99))
        assert codes.max() == 99

    def test_range_exceeded(self):
        df = pd.DataFrame({"list": "L1", "target_word": [f"w{i}" for i in range(61)]})
        with pytest.raises(TriggerRangeError):
            number_within_lists(df, "target_word", (40, 99))
