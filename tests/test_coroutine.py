import pytest

from almondkit.coroutine import Coroutine


def _counter(n):
    yield from range(n)


def _recording(started):
    started.append(True)
    yield 7


def _failing():
    yield 1
    raise KeyError("boom")


def test_values_are_yielded_in_order():
    co = Coroutine(_counter(5))
    values = []
    while co.resume():
        values.append(co.current_value())
    assert values == list(range(5))


def test_value_before_first_resume_is_default():
    co = Coroutine(_counter(3))
    assert co.current_value() == 0


def test_finished_coroutine_rejects_value_and_resume():
    co = Coroutine(_counter(1))
    assert co.resume() is True
    assert co.resume() is False
    assert co.done is True
    with pytest.raises(RuntimeError):
        co.current_value()
    assert co.resume() is False


def test_generator_does_not_start_before_resume():
    started = []
    co = Coroutine(_recording(started))
    assert started == []
    assert co.resume() is True
    assert started == [True]
    assert co.current_value() == 7


def test_exception_is_rethrown_then_finished():
    co = Coroutine(_failing())
    assert co.resume() is True
    with pytest.raises(KeyError):
        co.resume()
    assert co.resume() is False
    with pytest.raises(RuntimeError):
        co.current_value()