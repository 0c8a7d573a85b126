"""Benchmarks for the Option and Result combinators: functional API vs methods."""

import statistics
import timeit
from collections.abc import Callable
from enum import IntEnum, StrEnum, auto
from typing import Annotated, Final, NamedTuple

import typer
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
from rich.text import Text

import tagunion as tu
from tagunion import option, result

app = typer.Typer(help="Option and Result benchmarks: functional API vs methods")


class Runs(IntEnum):
    """Cost category for benchmarks, determining iteration counts."""

    CHEAP = 2_000
    NORMAL = 1_000
    EXPENSIVE = 200


class Style(StrEnum):
    """Calling style being measured."""

    FUNCTIONAL = auto()
    METHOD = auto()


class BenchmarkResult(NamedTuple):
    """Result of a single benchmark comparison."""

    category: str
    name: str
    functional_median: float
    method_median: float
    ratio: float


class BenchmarkMetadata(NamedTuple):
    """Metadata for a benchmark function."""

    category: str
    name: str
    cost: Runs
    style: Style


TEST_VALUE: Final[int] = 42
# mixed present/absent data, every third element missing
NULLABLE_DATA: Final = [None if x % 3 == 0 else x for x in range(100)]
OPTIONS: Final = [tu.NONE if x is None else tu.Some(x) for x in NULLABLE_DATA]
RESULTS_OK: Final = [tu.Ok[int, str](x) for x in range(100)]
RESULTS_LATE_ERR: Final = [*RESULTS_OK, tu.Err[int, str]("late")]
type BenchFn = Callable[[], object]

CONSOLE: Final = Console()
RESULTS: list[BenchmarkResult] = []
BENCHMARK_REGISTRY: dict[BenchFn, BenchmarkMetadata] = {}


def bench(
    category: str,
    name: str,
    style: Style,
    cost: Runs = Runs.CHEAP,
) -> Callable[[BenchFn], BenchFn]:
    """Decorator to register a benchmark function with its metadata.

    Args:
        category (str): The category of the benchmark (e.g., "Option").
        name (str): The name of the benchmark (e.g., "map").
        style (Style): Whether the functional or the method API is measured.
        cost (Runs): The cost category, defaults to CHEAP.

    Returns:
        Callable: The decorated function.
    """

    def decorator(func: BenchFn) -> BenchFn:
        BENCHMARK_REGISTRY[func] = BenchmarkMetadata(
            category=category, name=name, cost=cost, style=style
        )
        return func

    return decorator


@bench("Option", "map", Style.FUNCTIONAL)
def bench_option_map_functional() -> object:
    return option.map(option.some(TEST_VALUE), lambda x: x + 1)


@bench("Option", "map", Style.METHOD)
def bench_option_map_method() -> object:
    return tu.Some(TEST_VALUE).map(lambda x: x + 1)


@bench("Option", "then chain", Style.FUNCTIONAL)
def bench_option_then_functional() -> object:
    return option.then(
        option.then(option.some(TEST_VALUE), option.some), lambda _: option.none()
    )


@bench("Option", "then chain", Style.METHOD)
def bench_option_then_method() -> object:
    return tu.Some(TEST_VALUE).and_then(tu.Some).and_then(lambda _: tu.NONE)


@bench("Option", "all", Style.FUNCTIONAL, Runs.EXPENSIVE)
def bench_option_all_functional() -> object:
    return option.all(OPTIONS[1:3] * 50)


@bench("Option", "all", Style.METHOD, Runs.EXPENSIVE)
def bench_option_all_method() -> object:
    return tu.Option.all(OPTIONS[1:3] * 50)


@bench("Result", "map_error", Style.FUNCTIONAL)
def bench_result_map_error_functional() -> object:
    return result.map_error(result.err("boom"), str.upper)


@bench("Result", "map_error", Style.METHOD)
def bench_result_map_error_method() -> object:
    return tu.Err("boom").map_err(str.upper)


@bench("Result", "or", Style.FUNCTIONAL)
def bench_result_or_functional() -> object:
    return result.or_(result.err("boom"), result.ok(TEST_VALUE))


@bench("Result", "or", Style.METHOD)
def bench_result_or_method() -> object:
    return tu.Err("boom").or_(tu.Ok(TEST_VALUE))


@bench("Result", "all (late error)", Style.FUNCTIONAL, Runs.NORMAL)
def bench_result_all_functional() -> object:
    return result.all(RESULTS_LATE_ERR)


@bench("Result", "all (late error)", Style.METHOD, Runs.NORMAL)
def bench_result_all_method() -> object:
    return tu.Result.all(RESULTS_LATE_ERR)


def bench_one(functional_fn: BenchFn, method_fn: BenchFn, repeats: int) -> None:
    """Run a pair of benchmarks and store their median timings."""
    meta = BENCHMARK_REGISTRY[functional_fn]
    n_calls = meta.cost.value // 10
    functional_times = [
        timeit.timeit(functional_fn, number=n_calls) for _ in range(repeats)
    ]
    method_times = [timeit.timeit(method_fn, number=n_calls) for _ in range(repeats)]
    functional_median = statistics.median(functional_times)
    method_median = statistics.median(method_times)
    RESULTS.append(
        BenchmarkResult(
            category=meta.category,
            name=meta.name,
            functional_median=functional_median,
            method_median=method_median,
            ratio=functional_median / method_median,
        )
    )


def _pair_benchmarks() -> list[tuple[BenchFn, BenchFn]]:
    """Group registered functions by (category, name) into functional/method pairs."""
    pairs: dict[tuple[str, str], dict[Style, BenchFn]] = {}
    for func, meta in BENCHMARK_REGISTRY.items():
        pairs.setdefault((meta.category, meta.name), {})[meta.style] = func

    benchmarks: list[tuple[BenchFn, BenchFn]] = []
    for (category, name), impls in pairs.items():
        if Style.FUNCTIONAL not in impls or Style.METHOD not in impls:
            CONSOLE.print(
                f"[yellow]Warning: Skipping {category}/{name} - missing style[/yellow]"
            )
            continue
        benchmarks.append((impls[Style.FUNCTIONAL], impls[Style.METHOD]))
    return benchmarks


def _run_all_benchmarks(repeats: int) -> None:
    benchmarks = _pair_benchmarks()
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeRemainingColumn(),
        console=CONSOLE,
    ) as progress:
        task = progress.add_task("[cyan]Running benchmarks...", total=len(benchmarks))
        for functional_fn, method_fn in benchmarks:
            meta = BENCHMARK_REGISTRY[functional_fn]
            progress.update(task, description=f"[cyan]{meta.category}: {meta.name}")
            bench_one(functional_fn, method_fn, repeats)
            progress.advance(task)


def _display_results() -> None:
    """Display benchmark results in a formatted table."""
    table = Table(title="Combinator Benchmark Results (functional vs method)")
    table.add_column("Category", style="cyan")
    table.add_column("Operation", style="white")
    table.add_column("Functional (s, median)", justify="right", style="green")
    table.add_column("Method (s, median)", justify="right", style="yellow")
    table.add_column("Overhead", justify="right")

    for res in RESULTS:
        overhead_style = "red bold" if res.ratio > 1 else "green bold"
        table.add_row(
            res.category,
            res.name,
            f"{res.functional_median:.5f}",
            f"{res.method_median:.5f}",
            Text(f"{res.ratio:.2f}x", style=overhead_style),
        )

    CONSOLE.print(table)
    CONSOLE.print()
    CONSOLE.print(
        Text("Median overhead: ", style="bold")
        + Text(f"{statistics.median(r.ratio for r in RESULTS):.2f}x", style="bold")
    )


@app.command()
def run(
    repeats: Annotated[
        int, typer.Option("--repeats", "-r", help="Timing repetitions per benchmark.")
    ] = 50,
) -> None:
    """Run all benchmarks and display results."""
    CONSOLE.print(Text("Running combinator benchmarks...", style="bold blue"))
    CONSOLE.print()
    _run_all_benchmarks(repeats)
    _display_results()


@app.command(name="list")
def list_benchmarks() -> None:
    """List the registered benchmarks."""
    table = Table(title="Registered benchmarks")
    table.add_column("Category", style="cyan")
    table.add_column("Operation")
    table.add_column("Style", style="magenta")
    table.add_column("Runs", justify="right")
    for meta in BENCHMARK_REGISTRY.values():
        table.add_row(meta.category, meta.name, meta.style, str(meta.cost.value))
    CONSOLE.print(table)


if __name__ == "__main__":
    app()
