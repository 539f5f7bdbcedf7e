import pytest

from strkit.arrays import (
    add_at,
    append,
    append_at,
    before_last_word,
    concat,
    copy_limited,
    insert_at,
    last_word,
    total_length,
)

WORDS = ["alpha", "beta", "gamma"]


def test_last_word():
    assert last_word(WORDS) == "gamma"
    assert last_word(["solo"]) == "solo"


def test_last_word_empty():
    assert last_word([]) is None


def test_before_last_word():
    assert before_last_word(WORDS) == "beta"
    assert before_last_word(["x", "y"]) == "x"


@pytest.mark.parametrize("strings", [[], ["only"]])
def test_before_last_word_too_short(strings):
    assert before_last_word(strings) is None


def test_add_at_keeps_element():
    result = add_at(WORDS, ["x", "y"], 1)
    assert result == ["alpha", "x", "y", "beta", "gamma"]
    assert WORDS == ["alpha", "beta", "gamma"]


def test_add_at_erase_replaces_element():
    assert add_at(WORDS, ["x", "y"], 1, True) == ["alpha", "x", "y", "gamma"]


def test_add_at_length_invariant():
    for at in range(len(WORDS) + 1):
        assert len(add_at(WORDS, ["x"], at)) == len(WORDS) + 1
    for at in range(len(WORDS)):
        assert len(add_at(WORDS, ["x"], at, True)) == len(WORDS)


def test_add_at_bounds():
    assert add_at(WORDS, ["x"], 3) == WORDS + ["x"]
    with pytest.raises(IndexError):
        add_at(WORDS, ["x"], 4)
    with pytest.raises(IndexError):
        add_at(WORDS, ["x"], 3, True)
    with pytest.raises(IndexError):
        add_at(WORDS, ["x"], -1)


def test_insert_at_middle_and_start():
    assert insert_at(WORDS, "new", 0) == ["new", "alpha", "beta", "gamma"]
    assert insert_at(WORDS, "new", 2) == ["alpha", "beta", "new", "gamma"]


def test_insert_at_past_end_appends():
    assert insert_at(WORDS, "new", 10) == WORDS + ["new"]


def test_insert_at_negative():
    with pytest.raises(IndexError):
        insert_at(WORDS, "new", -1)


def test_concat():
    assert concat(WORDS, ["delta"]) == ["alpha", "beta", "gamma", "delta"]
    assert concat([], []) == []


def test_append_does_not_modify_argument():
    original = list(WORDS)
    result = append(original, "delta")
    assert result[-1] == "delta"
    assert result[:-1] == WORDS
    assert original == WORDS


def test_append_at():
    assert append_at(WORDS, "z", 1) == ["alpha", "z", "beta", "gamma"]
    assert append_at(WORDS, "z", 3) == WORDS + ["z"]
    assert append_at([], "z", 0) == ["z"]


def test_append_at_out_of_range():
    with pytest.raises(IndexError):
        append_at(WORDS, "z", 4)


def test_total_length():
    assert total_length(WORDS) == len("alphabetagamma")
    assert total_length([]) == 0
    assert total_length(["", ""]) == 0


def test_copy_limited():
    assert copy_limited(WORDS, 2) == ["alpha", "beta"]
    assert copy_limited(WORDS, 10) == WORDS
    assert copy_limited(WORDS, 0) == []


def test_copy_limited_negative():
    with pytest.raises(ValueError):
        copy_limited(WORDS, -1)