from __future__ import annotations

import pytest

from call_schedule import (
    CallScheduleError,
    ScheduleConfig,
    ScheduleValidationError,
    blocking_throttle,
    deferring_throttle,
    postpone,
)

STRICT = ScheduleConfig(validate_inputs=True)
FACTORIES = [postpone, blocking_throttle, deferring_throttle]


@pytest.mark.parametrize("factory", FACTORIES)
@pytest.mark.parametrize(
    ("callback", "wait", "field"),
    [
        ("not-callable", 1.0, "callback"),
        (print, -1.0, "wait"),
        (print, "1", "wait"),
        (print, None, "wait"),
    ],
    ids=["non-callable", "negative-wait", "string-wait", "none-wait"],
)
def test_strict_factories_reject_invalid_inputs(factory, callback, wait, field, scheduler):
    with pytest.raises(ScheduleValidationError) as excinfo:
        factory(callback, wait, scheduler=scheduler, config=STRICT)
    assert excinfo.value.field == field
    assert isinstance(excinfo.value, CallScheduleError)
    assert isinstance(excinfo.value, ValueError)


@pytest.mark.parametrize("factory", FACTORIES)
def test_default_factories_accept_negative_wait(factory, scheduler, recorder):
    wrapped = factory(recorder, -5, scheduler=scheduler)
    wrapped("x")
    scheduler.advance(0)

    assert recorder.args == [("x",)]


def test_default_non_callable_fails_on_first_invocation(scheduler):
    throttled = blocking_throttle("not-callable", 1, scheduler=scheduler)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        throttled()


def test_strict_accepts_zero_wait(scheduler, recorder):
    wrapped = deferring_throttle(recorder, 0, scheduler=scheduler, config=STRICT)
    wrapped(1)
    wrapped(2)
    scheduler.advance(0)

    assert recorder.args == [(1,), (2,)]
