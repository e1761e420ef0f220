"""Benchmarks for adaptchain - benchs.py.

Each adaptor is timed next to the closest standard library or more-itertools construct.
"""

import heapq
import itertools

import more_itertools as mit

import adaptchain as ac

from ._registery import bench

# Helper functions
# ------------------------------------------------------------


def _runs_of_three(data: ac.Seq[int]) -> tuple[int, ...]:
    return data.fn_map(lambda x: x // 3).collect(tuple)


def _evens_odds(data: ac.Seq[int]) -> tuple[tuple[int, ...], tuple[int, ...]]:
    values = data.inner()
    return ac.Stride(values, 2).collect(tuple), ac.Stride(values[1:], 2).collect(tuple)


def _pairs(src: ac.BatchSource[int]) -> ac.Option[tuple[int, int]]:
    return src.pull().and_then(lambda a: src.pull().map(lambda b: (a, b)))


# Benchmark classes
# ------------------------------------------------------------


class Dedup:
    """Benchmark removing consecutive duplicates."""

    @bench(gen=_runs_of_three)
    @staticmethod
    def adaptor(data: tuple[int, ...]) -> object:
        """Benchmark the Dedup adaptor."""
        return ac.Dedup(data).drain()

    @bench(gen=_runs_of_three)
    @staticmethod
    def unique_justseen(data: tuple[int, ...]) -> object:
        """Benchmark more_itertools.unique_justseen."""
        return mit.consume(mit.unique_justseen(data))


class Merge:
    """Benchmark merging two sorted sequences."""

    @bench(gen=_evens_odds)
    @staticmethod
    def adaptor(data: tuple[tuple[int, ...], tuple[int, ...]]) -> object:
        """Benchmark the Merge adaptor."""
        return ac.Merge(*data).drain()

    @bench(gen=_evens_odds)
    @staticmethod
    def heapq_merge(data: tuple[tuple[int, ...], tuple[int, ...]]) -> object:
        """Benchmark heapq.merge."""
        return mit.consume(heapq.merge(*data))


class Interleave:
    """Benchmark alternating two sequences."""

    @bench(gen=_evens_odds)
    @staticmethod
    def adaptor(data: tuple[tuple[int, ...], tuple[int, ...]]) -> object:
        """Benchmark the Interleave adaptor."""
        return ac.Interleave(*data).drain()

    @bench(gen=_evens_odds)
    @staticmethod
    def interleave_longest(data: tuple[tuple[int, ...], tuple[int, ...]]) -> object:
        """Benchmark more_itertools.interleave_longest."""
        return mit.consume(mit.interleave_longest(*data))


class Step:
    """Benchmark stepping through a sequence."""

    @bench()
    @staticmethod
    def adaptor(data: tuple[int, ...]) -> object:
        """Benchmark the Step adaptor."""
        return ac.Step(iter(data), 3).drain()

    @bench()
    @staticmethod
    def islice(data: tuple[int, ...]) -> object:
        """Benchmark itertools.islice with a step."""
        return mit.consume(itertools.islice(data, 0, None, 3))


class GroupBy:
    """Benchmark grouping runs of elements."""

    @bench(gen=_runs_of_three)
    @staticmethod
    def adaptor(data: tuple[int, ...]) -> object:
        """Benchmark the GroupBy adaptor, reading every group."""
        return [group.count() for _, group in ac.GroupBy(data, lambda x: x)]

    @bench(gen=_runs_of_three)
    @staticmethod
    def itertools_groupby(data: tuple[int, ...]) -> object:
        """Benchmark itertools.groupby, reading every group."""
        return [mit.ilen(group) for _, group in itertools.groupby(data)]


class Product:
    """Benchmark the cartesian product."""

    @bench(gen=lambda size: size.step(16).collect(tuple))
    @staticmethod
    def adaptor(data: tuple[int, ...]) -> object:
        """Benchmark the Product adaptor."""
        return ac.Product(data, data).drain()

    @bench(gen=lambda size: size.step(16).collect(tuple))
    @staticmethod
    def itertools_product(data: tuple[int, ...]) -> object:
        """Benchmark itertools.product."""
        return mit.consume(itertools.product(data, data))


class Batching:
    """Benchmark pairing consecutive elements."""

    @bench()
    @staticmethod
    def adaptor(data: tuple[int, ...]) -> object:
        """Benchmark the Batching adaptor."""
        return ac.Batching(data, _pairs).drain()

    @bench()
    @staticmethod
    def batched(data: tuple[int, ...]) -> object:
        """Benchmark itertools.batched."""
        return mit.consume(itertools.batched(data, 2))
