from functools import partial

import pytest
from purefn.functional.composition import compose, identity, pipe
from purefn.functional.pure import add, factorial, multiply, range_inclusive


def double(x):
    return 2 * x


def increment(x):
    return x + 1


def test_compose_applies_right_to_left():
    assert compose(double, increment)(3) == double(increment(3)) == 8


def test_pipe_applies_left_to_right():
    assert pipe(double, increment)(3) == increment(double(3)) == 7


def test_innermost_receives_all_arguments():
    assert compose(double, add)(3, 4) == 14


def test_empty_composition_is_identity():
    assert compose() is identity
    assert pipe()(5) == 5


def test_factorial_as_composition():
    composed = compose(multiply, partial(range_inclusive, 1))
    for n in range(8):
        assert composed(n) == factorial(n)


def test_composed_name():
    assert compose(double, increment).__name__ == "compose(double, increment)"


def test_non_callable_rejected():
    with pytest.raises(TypeError):
        compose(double, 3)
    with pytest.raises(TypeError):
        pipe(None)
