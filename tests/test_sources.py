"""Tests for the primitive sources and the base adaptor helpers."""

import pytest

import adaptchain as ac


class TestIter:
    """Test the source over Python iterators."""

    def test_pull_sequence(self) -> None:
        """Test pulling a generator element by element."""
        it = ac.Iter(x for x in (1, 2))
        assert it.pull() == ac.Some(1)
        assert it.pull() == ac.Some(2)
        assert it.pull() == ac.NONE

    def test_none_elements_are_values(self) -> None:
        """Test `None` elements are not mistaken for exhaustion."""
        assert ac.Iter([None, 1]).collect() == [None, 1]

    def test_exhaustion_is_sticky(self) -> None:
        """Test an Iter stays exhausted even if the wrapped iterator resumes."""

        class Resuming:
            def __init__(self) -> None:
                self.calls = 0

            def __iter__(self) -> "Resuming":
                return self

            def __next__(self) -> int:
                self.calls += 1
                if self.calls == 1:
                    raise StopIteration
                return self.calls

        it = ac.Iter(Resuming())
        assert it.pull() == ac.NONE
        assert it.pull() == ac.NONE

    def test_not_restartable(self) -> None:
        """Test an Iter refuses to restart."""
        with pytest.raises(ac.ConfigurationError, match="cannot be restarted"):
            ac.Iter([1]).restart()


class TestSeq:
    """Test the restartable source over owned storage."""

    def test_restart_shares_storage(self) -> None:
        """Test restarting does not copy the underlying sequence."""
        data = [1, 2, 3]
        seq = ac.Seq(data)
        assert seq.restart().inner() is data

    def test_materializes_iterables(self) -> None:
        """Test a non-sequence iterable is stored as a tuple."""
        seq = ac.Seq(x for x in range(3))
        assert seq.inner() == (0, 1, 2)
        assert seq.restart().collect() == [0, 1, 2]

    def test_restart_copies_position(self) -> None:
        """Test a restarted Seq resumes where the original is."""
        seq = ac.Seq([1, 2, 3])
        seq.pull()
        fresh = seq.restart()
        assert len(fresh) == len(seq) == 2
        assert fresh.collect() == [2, 3]
        assert seq.collect() == [2, 3]

    def test_len_counts_remaining(self) -> None:
        """Test the length shrinks as elements are pulled."""
        seq = ac.Seq("abc")
        seq.pull()
        assert len(seq) == 2

    def test_from_unpacked_values(self) -> None:
        """Test building a Seq from unpacked values."""
        assert ac.Seq.from_(1, 2, 3).collect() == [1, 2, 3]
        assert ac.Seq.from_([1, 2]).collect() == [1, 2]

    def test_repr_is_truncated(self) -> None:
        """Test the repr elides elements past the configured limit."""
        assert repr(ac.Seq(range(20))) == "Seq(0, 1, 2, 3, 4, 5, 6, 7, 8, 9, ...)"


class TestStride:
    """Test the strided source."""

    @pytest.mark.parametrize(
        ("data", "step", "expected"),
        [
            ([0, 1, 2, 3, 4], 2, [0, 2, 4]),
            ([0, 1, 2, 3, 4], -2, [4, 2, 0]),
            ([0, 1, 2, 3], -1, [3, 2, 1, 0]),
            ([], 3, []),
            ([1, 2], 5, [1]),
        ],
    )
    def test_stride(self, data: list[int], step: int, expected: list[int]) -> None:
        """Test striding forwards and backwards."""
        assert ac.Stride(data, step).collect() == expected

    @pytest.mark.parametrize("step", [0, 1.5, "2", None])
    def test_invalid_step(self, step: object) -> None:
        """Test a zero or non-integer stride is rejected."""
        with pytest.raises(ac.ConfigurationError, match="non-zero integer"):
            ac.Stride([1], step)  # type: ignore[arg-type]

    def test_restart(self) -> None:
        """Test restarting keeps the stride and the position."""
        stride = ac.Stride(range(10), 4)
        assert stride.pull() == ac.Some(0)
        assert stride.restart().collect() == [4, 8]
        assert stride.collect() == [4, 8]
        assert len(ac.Stride(range(10), 4)) == 3


class TestTimes:
    """Test the counter source."""

    def test_counts(self) -> None:
        """Test times yields its counter."""
        assert ac.times(4).collect() == [0, 1, 2, 3]

    @pytest.mark.parametrize("n", [-1, 2.5, "3", True])
    def test_invalid_count(self, n: object) -> None:
        """Test a negative or non-integer count is rejected."""
        with pytest.raises(ac.ConfigurationError, match="non-negative integer"):
            ac.times(n)  # type: ignore[arg-type]


class TestIntoSource:
    """Test operand conversion."""

    def test_sources_pass_through(self) -> None:
        """Test a Source is returned unchanged."""
        seq = ac.Seq([1])
        assert ac.into_source(seq) is seq

    def test_sequence_becomes_seq(self) -> None:
        """Test a list becomes a restartable Seq."""
        assert ac.can_restart(ac.into_source([1, 2]))

    def test_iterator_becomes_iter(self) -> None:
        """Test a generator becomes a non restartable Iter."""
        assert isinstance(ac.into_source(x for x in ()), ac.Iter)

    def test_rejects_non_iterables(self) -> None:
        """Test objects that cannot be pulled from are rejected."""
        with pytest.raises(ac.ConfigurationError, match="cannot pull"):
            ac.into_source(3.5)


class TestAdaptorHelpers:
    """Test the helpers every adaptor inherits."""

    def test_python_iteration(self) -> None:
        """Test adaptors work in for-loops and builtins."""
        assert sum(ac.Seq([1, 2, 3]).fn_map(lambda x: x * 2)) == 12
        assert list(ac.Seq([])) == []

    def test_next_builtin(self) -> None:
        """Test the `next` builtin raises StopIteration on exhaustion."""
        it = ac.Seq([1])
        assert next(it) == 1
        with pytest.raises(StopIteration):
            next(it)

    def test_write_to_stops_at_target_length(self) -> None:
        """Test write_to fills the target without overreading."""
        target = [0, 0]
        it = ac.Seq([5, 6, 7])
        assert it.write_to(target) == 2
        assert target == [5, 6]
        assert it.collect() == [7]

    def test_write_to_stops_at_source_length(self) -> None:
        """Test write_to stops when the source runs out."""
        target = [0, 0, 0]
        assert ac.Seq([1]).write_to(target) == 1
        assert target == [1, 0, 0]

    def test_drain(self) -> None:
        """Test drain consumes every element."""
        it = ac.Seq([1, 2]).dedup()
        it.drain()
        assert it.pull() == ac.NONE

    def test_count(self) -> None:
        """Test count consumes and counts."""
        assert ac.Seq(range(7)).step(2).count() == 4

    def test_into(self) -> None:
        """Test piping an adaptor into a function."""
        assert ac.Seq([3, 1, 2]).into(sorted) == [1, 2, 3]

    def test_custom_source(self) -> None:
        """Test any object with a `pull` method can feed an adaptor."""

        class Countdown:
            def __init__(self, start: int) -> None:
                self.value = start

            def pull(self) -> ac.Option[int]:
                if self.value == 0:
                    return ac.NONE
                self.value -= 1
                return ac.Some(self.value + 1)

        assert ac.FnMap(Countdown(3), str).collect() == ["3", "2", "1"]
        assert not ac.can_restart(Countdown(1))
