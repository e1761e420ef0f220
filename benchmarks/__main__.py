"""Entry point for benchmarks CLI."""

from typing import Annotated

import typer

from . import benchs  # pyright: ignore[reportUnusedImport] # noqa: F401
from ._registery import BENCHMARKS, CONSOLE, collect_raw_timings, summarize

app = typer.Typer(help="Benchmarks for adaptchain developments.")


@app.command()
def show() -> None:
    """Show all registered benchmarks."""
    for bench in BENCHMARKS:
        CONSOLE.print(f"{bench.category}: {bench.name}")


@app.command()
def run(
    *,
    category: Annotated[
        str | None,
        typer.Option("--category", "-c", help="Only run benchmarks of this category."),
    ] = None,
) -> None:
    """Run benchmarks and print the median timings."""
    selected = [b for b in BENCHMARKS if category is None or b.category == category]
    if not selected:
        CONSOLE.print(f"No benchmark in category {category!r}", style="bold red")
        raise typer.Exit(code=1)
    CONSOLE.print("Running benchmarks...", style="bold blue")
    CONSOLE.print(summarize(collect_raw_timings(selected)))
    CONSOLE.print("✓ Done", style="bold green")


if __name__ == "__main__":
    app()
