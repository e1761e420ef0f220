"""Tests for GroupBy and its groups."""

import adaptchain as ac


def _collect_groups[K, T](groups: ac.GroupBy[K, T]) -> list[tuple[K, list[T]]]:
    return [(key, group.collect()) for key, group in groups]


class TestGroupBy:
    """Test grouping runs of elements sharing a key."""

    def test_runs_by_identity(self) -> None:
        """Test grouping by the element itself."""
        groups = ac.GroupBy([1, 1, 2, 3, 3, 3, 1], lambda x: x)
        assert _collect_groups(groups) == [(1, [1, 1]), (2, [2]), (3, [3, 3, 3]), (1, [1])]

    def test_runs_by_key(self) -> None:
        """Test grouping by a derived key."""
        words = ["apple", "avocado", "banana", "blueberry", "cherry"]
        groups = ac.Seq(words).group_by(lambda w: w[0])
        assert _collect_groups(groups) == [
            ("a", ["apple", "avocado"]),
            ("b", ["banana", "blueberry"]),
            ("c", ["cherry"]),
        ]

    def test_empty_source(self) -> None:
        """Test an empty source yields no group."""
        groups = ac.GroupBy([], lambda x: x)
        assert groups.pull() == ac.NONE
        assert groups.pull() == ac.NONE

    def test_skipping_unread_groups(self) -> None:
        """Test pulling the next group skips the rest of the current run."""
        groups = ac.GroupBy([1, 1, 1, 2, 2, 3], lambda x: x)
        assert [key for key, _ in groups] == [1, 2, 3]

    def test_partially_read_group(self) -> None:
        """Test a group read halfway does not leak into the next one."""
        groups = ac.GroupBy("aaabbc", lambda c: c)
        _, first = groups.pull().unwrap()
        assert first.pull() == ac.Some("a")
        key, second = groups.pull().unwrap()
        assert key == "b"
        assert second.collect("".join) == "bb"

    def test_stale_group_is_exhausted(self) -> None:
        """Test a group reports exhaustion once the outer sequence moved on."""
        groups = ac.GroupBy([1, 1, 2, 2], lambda x: x)
        _, first = groups.pull().unwrap()
        _, second = groups.pull().unwrap()
        assert not first.is_live()
        assert first.pull() == ac.NONE
        assert second.is_live()
        assert second.collect() == [2, 2]
        assert first.pull() == ac.NONE

    def test_group_exhaustion_is_sticky(self) -> None:
        """Test a finished group keeps reporting exhaustion."""
        groups = ac.GroupBy([1, 2], lambda x: x)
        _, first = groups.pull().unwrap()
        assert first.collect() == [1]
        assert first.pull() == ac.NONE
        assert groups.pull().map(lambda pair: pair[0]) == ac.Some(2)

    def test_group_key_attribute(self) -> None:
        """Test groups expose their key."""
        groups = ac.GroupBy([3, 5, 4], lambda x: x % 2)
        _, group = groups.pull().unwrap()
        assert group.key == 1
        assert repr(group) == "Group(key=1)"

    def test_key_called_once_per_element(self) -> None:
        """Test the key function runs exactly once for each element."""
        calls: list[int] = []

        def key(x: int) -> int:
            calls.append(x)
            return x // 10

        groups = ac.GroupBy([1, 2, 11, 12, 21], key)
        assert _collect_groups(groups) == [(0, [1, 2]), (1, [11, 12]), (2, [21])]
        assert calls == [1, 2, 11, 12, 21]

    def test_lookahead_is_one_element(self, counting) -> None:  # noqa: ANN001
        """Test reading a run only reads one element past its end."""
        source = counting([1, 1, 2, 3])
        groups = ac.GroupBy(source, lambda x: x)
        _, first = groups.pull().unwrap()
        assert source.pulls == 1
        assert first.collect() == [1, 1]
        assert source.pulls == 3

    def test_none_keys(self) -> None:
        """Test `None` is a valid key."""
        groups = ac.GroupBy([None, None, 0], lambda x: x)
        assert _collect_groups(groups) == [(None, [None, None]), (0, [0])]
