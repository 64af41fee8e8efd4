import pytest

from algorithms.boyer_moore import build_bad_char_table
from utils.dna import InvalidInput


def test_bad_char_last_occurrence():
    assert build_bad_char_table("ACGTACGT") == {"A": 4, "C": 5, "G": 6, "T": 7}
    assert build_bad_char_table("GGGG") == {"G": 3}
    assert build_bad_char_table("GA") == {"G": 0, "A": 1}


def test_bad_char_absent_characters():
    table = build_bad_char_table("AAC")
    assert "G" not in table and "T" not in table
    assert table.get("T", -1) == -1


def test_bad_char_empty_pattern():
    with pytest.raises(InvalidInput):
        build_bad_char_table("")
