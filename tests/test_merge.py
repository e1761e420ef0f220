"""Tests for the Merge adaptor."""

import pytest

import adaptchain as ac


class TestMerge:
    """Test merging two sequences in ascending order."""

    def test_interleaved_values(self) -> None:
        """Test merging two sorted sequences with interleaved values."""
        assert ac.Merge([1, 3, 5], [2, 4, 6]).collect() == [1, 2, 3, 4, 5, 6]

    @pytest.mark.parametrize(
        ("a", "b"),
        [
            ([], []),
            ([1, 2], []),
            ([], [1, 2]),
            ([1, 1, 2], [1, 2, 2]),
            ([5, 6, 7], [1, 2]),
            (list(range(0, 20, 3)), list(range(0, 20, 2))),
        ],
    )
    def test_sorted_permutation(self, a: list[int], b: list[int]) -> None:
        """Test the merge of sorted inputs is sorted and keeps every element."""
        out = ac.Merge(a, b).collect()
        assert out == sorted(a + b)

    def test_ties_go_to_left(self) -> None:
        """Test equal elements from the left come before those from the right."""
        left = [(1, "a"), (2, "a")]
        right = [(1, "b"), (2, "b")]
        out = ac.Merge(left, right, key=lambda p: p[0]).collect()
        assert out == [(1, "a"), (1, "b"), (2, "a"), (2, "b")]

    def test_custom_key(self) -> None:
        """Test a key function supplies the ordering."""
        out = ac.Seq([3, 1]).merge([2], key=lambda x: -x).collect()
        assert out == [3, 2, 1]

    def test_unsorted_input_does_not_fail(self) -> None:
        """Test unsorted inputs still yield every element exactly once."""
        out = ac.Merge([3, 1, 2], [0, 5, 4]).collect()
        assert sorted(out) == [0, 1, 2, 3, 4, 5]

    def test_incomparable_values_favor_left(self) -> None:
        """Test values that are not ordered against each other go left first."""
        out = ac.Merge([{1}, {3}], [{2}]).collect()
        assert out == [{1}, {3}, {2}]

    def test_lookahead_is_bounded(self, counting) -> None:  # noqa: ANN001
        """Test each pull reads at most one new element per side."""
        a = counting([1, 3, 5])
        b = counting([2, 4, 6])
        merged = ac.Merge(a, b)
        assert merged.pull() == ac.Some(1)
        assert (a.pulls, b.pulls) == (1, 1)
        assert merged.pull() == ac.Some(2)
        assert (a.pulls, b.pulls) == (2, 1)

    def test_exhaustion_is_sticky(self) -> None:
        """Test a drained merge keeps reporting exhaustion."""
        merged = ac.Merge([1], [2])
        merged.drain()
        assert merged.pull() == ac.NONE
        assert merged.pull() == ac.NONE

    def test_restart_keeps_pending_elements(self) -> None:
        """Test a restarted merge yields what the original has left, lookahead included."""
        merged = ac.Merge([1, 4], ac.Stride([0, 9, 2, 9, 3], 2))
        assert merged.pull() == ac.Some(0)
        assert merged.restart().collect() == [1, 2, 3, 4]
        assert merged.collect() == [1, 2, 3, 4]
