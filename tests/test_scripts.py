"""Tests for the developer scripts."""

import importlib.util
from pathlib import Path
from types import ModuleType

import pytest

SCRIPTS_DIR = Path(__file__).parents[1].joinpath("scripts")


def _load(name: str) -> ModuleType:
    spec = importlib.util.spec_from_file_location(name, SCRIPTS_DIR / f"{name}.py")
    assert spec is not None
    assert spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(scope="module")
def bench() -> ModuleType:
    pytest.importorskip("typer")
    pytest.importorskip("rich")
    return _load("bench")


@pytest.fixture(scope="module")
def check_docstrings() -> ModuleType:
    pytest.importorskip("rich")
    return _load("check_docstrings")


def test_bench_registers_the_module_functions(bench: ModuleType) -> None:
    """Test that the decorated names are the very functions the runner calls."""
    assert bench.bench_option_map_method in bench.BENCHMARK_REGISTRY
    assert bench.bench_result_all_functional in bench.BENCHMARK_REGISTRY


def test_bench_pairs_every_benchmark(bench: ModuleType) -> None:
    """Test that each registered benchmark has a functional and a method side."""
    pairs = bench._pair_benchmarks()  # noqa: SLF001
    assert len(pairs) * 2 == len(bench.BENCHMARK_REGISTRY)


def test_decorated_function_without_docstring_is_reported(
    check_docstrings: ModuleType, tmp_path: Path
) -> None:
    """Test that decorators no longer exempt a public function."""
    source = tmp_path / "mod.py"
    source.write_text(
        "from functools import wraps\n"
        "\n"
        "\n"
        "@wraps(print)\n"
        "def public() -> None:\n"
        "    pass\n",
        encoding="utf-8",
    )
    errors = check_docstrings._check_file(source)  # noqa: SLF001
    assert [(e.func_name, e.errors) for e in errors] == [
        ("public", ["Missing docstring"])
    ]


def test_unclosed_code_block_is_reported(
    check_docstrings: ModuleType, tmp_path: Path
) -> None:
    """Test that an unbalanced fence is reported."""
    source = tmp_path / "mod.py"
    source.write_text(
        'def public() -> None:\n    """Doc.\n\n    ```python\n    >>> 1\n    """\n',
        encoding="utf-8",
    )
    errors = check_docstrings._check_file(source)  # noqa: SLF001
    assert len(errors) == 1
    assert errors[0].errors == ["Unclosed ```python block"]


def test_private_function_may_skip_docstring(
    check_docstrings: ModuleType, tmp_path: Path
) -> None:
    """Test that private helpers are not required to have a docstring."""
    source = tmp_path / "mod.py"
    source.write_text("def _helper() -> None:\n    pass\n", encoding="utf-8")
    assert check_docstrings._check_file(source) == []  # noqa: SLF001
