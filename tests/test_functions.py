from hypothesis import given

from maybeasy import Just, Nothing, curry, functions
from maybeasy.hypothesis_strategies import anything, maybes, unaries


@given(anything(allow_nan=False))
def test_identity(a):
    assert functions.identity(a) == a


@given(unaries(anything()), unaries(anything()), anything())
def test_compose(f, g, arg):
    h = functions.compose(f, g)
    assert h(arg) == f(g(arg))


def test_compose_applies_rightmost_first():
    h = functions.compose(str, lambda v: v * 2, lambda v: v + 1)
    assert h(1) == '4'


def test_pipeline_applies_leftmost_first():
    h = functions.pipeline(lambda v: v + 1, lambda v: v * 2, str)
    assert h(1) == '4'


@given(maybes(anything()), anything())
def test_pipeline_over_maybe(m, default):
    h = functions.pipeline(
        lambda m: m.map(functions.identity),
        lambda m: m.get_or_else_value(default)
    )
    assert h(m) == m.get_or_else_value(default)


def f(first, second, *rest, default='default'):
    return first, second, rest, default


def test_curry_positional():
    assert curry(f)(Just(1))(Nothing()) == (
        Just(1), Nothing(), (), 'default'
    )


def test_curry_variadic():
    assert curry(f)(1)(2, 3, 4) == (1, 2, (3, 4), 'default')


def test_curry_keyword():
    assert curry(f)(default='other')(1)(2) == (1, 2, (), 'other')


def test_curry_all_arguments_calls_immediately():
    assert curry(f)(1, 2) == (1, 2, (), 'default')
