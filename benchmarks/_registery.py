import statistics
import timeit
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from functools import partial
from typing import Any, Final, NamedTuple, Self

import cytoolz as cz
from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
)
from rich.table import Table

import adaptchain as ac

type BenchFn = Callable[[], object]


WARMUP_RUNS: Final = 5
CALLS_BY_RUN: Final = 10
TARGET_BENCH_SEC: Final = 1
MIN_RUNS: Final = 20
SIZES: Final = (256, 512, 1024, 2048)

CONSOLE: Final = Console()


class Variant(NamedTuple):
    """A specific benchmark variant size."""

    size: int
    n_runs: int
    fn: BenchFn

    @classmethod
    def from_fn(cls, fn: BenchFn, size: int) -> Self:
        """Estimate number of runs needed for benchmark variant."""
        warmup_time = timeit.timeit(fn, number=WARMUP_RUNS) / WARMUP_RUNS
        est = int(TARGET_BENCH_SEC / 2 / warmup_time / CALLS_BY_RUN)
        return cls(size, max(MIN_RUNS, est), fn)


class Benchmark(NamedTuple):
    """A benchmark with multiple data sizes."""

    category: str
    name: str
    variants: list[Variant]


@dataclass(slots=True)
class Row:
    """Raw row of timing data."""

    category: str
    name: str
    size: int
    run_idx: int
    time: float


BENCHMARKS: list[Benchmark] = []


def bench[P](
    *, gen: Callable[[ac.Seq[int]], P] = lambda size: size.collect(tuple)
) -> Callable[[Callable[[P], object]], Callable[[P], object]]:
    """Decorator to register benchmarks with multiple data sizes.

    **gen** builds the benchmark input from a `Seq` over `range(size)`.
    The benchmarked function receives that input, and must build its own adaptors, since those are single-use.
    """

    def decorator(func: Callable[[P], object]) -> Callable[[P], object]:
        variants: list[Variant] = []
        for size in SIZES:
            data = ac.Seq(range(size)).into(gen)
            variants.append(Variant.from_fn(partial(func, data), size))

        BENCHMARKS.append(
            Benchmark(func.__qualname__.split(".")[0], func.__name__, variants)
        )
        return func

    return decorator


def collect_raw_timings(benchmarks: Iterable[Benchmark]) -> list[Row]:
    """Collect raw timing data for all benchmarks. Stats computed at the end."""
    benchmarks = list(benchmarks)
    total_runs = sum(v.n_runs for b in benchmarks for v in b.variants)
    CONSOLE.print(
        f"Found {len(benchmarks)} benchmarks, {total_runs} total runs",
        style="bold white",
    )

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeRemainingColumn(),
        console=CONSOLE,
    ) as progress:
        task = progress.add_task("[cyan]Running benchmarks...", total=total_runs)
        f = partial(_run_variant, progress, task)
        return [
            row
            for bench in benchmarks
            for variant in bench.variants
            for row in f(variant, bench)
        ]


def _run_variant(
    progress: Progress,
    task: Any,  # noqa: ANN401
    variant: Variant,
    bench: Benchmark,
) -> ac.FnMap[int, Row]:
    def _update_progress(run_idx: int) -> Row:
        progress.update(
            task,
            description=f"[cyan]{bench.category}: {bench.name} @ {variant.size}",
        )
        time_taken = timeit.timeit(variant.fn, number=CALLS_BY_RUN)
        progress.advance(task)
        return Row(bench.category, bench.name, variant.size, run_idx, time_taken)

    return ac.times(variant.n_runs).fn_map(_update_progress)


def summarize(rows: Iterable[Row]) -> Table:
    """Aggregate raw timings into a table of medians, in microseconds per call."""
    table = Table(title="adaptchain benchmarks")
    for column in ("category", "name", "size", "runs", "median (µs)"):
        table.add_column(column, justify="right" if column != "name" else "left")
    grouped = cz.itertoolz.groupby(lambda r: (r.category, r.name, r.size), rows)
    for (category, name, size), group in sorted(grouped.items()):
        median = statistics.median(r.time for r in group) / CALLS_BY_RUN * 1e6
        table.add_row(category, name, str(size), str(len(group)), f"{median:.2f}")
    return table
