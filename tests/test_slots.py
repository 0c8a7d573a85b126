"""Tests for slot usage in tagunion classes."""

import tagunion as tu


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    assert _check_slots(tu.Some(42))
    assert _check_slots(tu.NoneOption())
    assert _check_slots(tu.NONE)
    assert _check_slots(tu.Err[int, object](42))
    assert _check_slots(tu.Ok[int, object](42))
