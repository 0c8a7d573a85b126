"""Structural pattern matching over Option and Result."""

from __future__ import annotations

from tagunion import NONE, Err, NoneOption, Ok, Option, Result, Some


def _describe_result(result: Result[int, str]) -> str:
    match result:
        case Ok(value):
            return f"ok {value}"
        case Err(error):
            return f"err {error}"
        case _:
            raise AssertionError(result)


def _describe_option(option: Option[str]) -> str:
    match option:
        case Some(value):
            return f"some {value}"
        case NoneOption():
            return "none"
        case _:
            raise AssertionError(option)


def test_result_pattern_matching() -> None:
    """Test Result pattern matching."""
    assert _describe_result(Ok(42)) == "ok 42"
    assert _describe_result(Err("Something went wrong")) == "err Something went wrong"


def test_option_pattern_matching() -> None:
    """Test Option pattern matching."""
    assert _describe_option(Some("hello")) == "some hello"
    assert _describe_option(NONE) == "none"


def test_nested_pattern_matching() -> None:
    """Test nested Result and Option patterns."""
    results: list[Result[Option[int], str]] = [
        Ok(Some(10)),
        Ok(NONE),
        Err("error occurred"),
    ]
    seen: list[str] = []
    for result in results:
        match result:
            case Ok(Some(value)):
                seen.append(f"Ok(Some({value}))")
            case Ok(NoneOption()):
                seen.append("Ok(NONE)")
            case Err(error):
                seen.append(f"Err({error!r})")
    assert seen == ["Ok(Some(10))", "Ok(NONE)", "Err('error occurred')"]


def test_with_guards() -> None:
    """Test pattern matching with guards."""
    threshold = 10
    results: list[Result[int, str]] = [Ok(5), Ok(15), Err("invalid")]
    seen: list[str] = []
    for result in results:
        match result:
            case Ok(value) if value <= threshold:
                seen.append("small")
            case Ok(_):
                seen.append("large")
            case Err(_):
                seen.append("error")
    assert seen == ["small", "large", "error"]
