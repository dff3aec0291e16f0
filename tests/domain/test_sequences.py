"""Tests for sequence concatenation."""

from drillkit.domain.sequences import concatenate_arrays


def test_two_sequences() -> None:
    assert concatenate_arrays(["a", "b"], ["c"]) == ["a", "b", "c"]


def test_many_sequences_keep_call_order() -> None:
    assert concatenate_arrays([1, 2], [3, 4], [5]) == [1, 2, 3, 4, 5]


def test_single_sequence_is_copied() -> None:
    original = [1, 2]
    result = concatenate_arrays(original)
    assert result == [1, 2]
    assert result is not original


def test_no_arguments_returns_empty_list() -> None:
    assert concatenate_arrays() == []


def test_empty_sequences_contribute_nothing() -> None:
    assert concatenate_arrays([], ["x"], []) == ["x"]


def test_inputs_not_mutated() -> None:
    first, second = ["a"], ["b"]
    concatenate_arrays(first, second)
    assert first == ["a"]
    assert second == ["b"]


def test_tuples_accepted() -> None:
    assert concatenate_arrays(("a",), ("b", "c")) == ["a", "b", "c"]
