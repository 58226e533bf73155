from unittest.mock import Mock

from hypothesis import given

from maybeasy import Catamorphism, Just, Nothing, from_nullable, pipeline
from maybeasy import operator as op
from maybeasy.hypothesis_strategies import (anything, maybes, nullaries,
                                            predicates, unaries)


@given(unaries(anything()), maybes(anything()))
def test_map(f, m):
    assert op.map(f, m) == m.map(f)
    assert op.map(f)(m) == m.map(f)


@given(unaries(maybes(anything())), maybes(anything()))
def test_and_then(f, m):
    assert op.and_then(f, m) == m.and_then(f)
    assert op.and_then(f)(m) == m.and_then(f)


@given(nullaries(maybes(anything())), maybes(anything()))
def test_or_else(f, m):
    assert op.or_else(f, m) == m.or_else(f)
    assert op.or_else(f)(m) == m.or_else(f)


@given(nullaries(anything()), maybes(anything()))
def test_get_or_else(f, m):
    assert op.get_or_else(f, m) == m.get_or_else(f)
    assert op.get_or_else(f)(m) == m.get_or_else(f)


@given(anything(), maybes(anything()))
def test_get_or_else_value(default, m):
    assert op.get_or_else_value(default, m) == m.get_or_else_value(default)
    assert op.get_or_else_value(default)(m) == m.get_or_else_value(default)


@given(predicates(), maybes(anything()))
def test_filter(p, m):
    assert op.filter(p, m) == m.filter(p)
    assert op.filter(p)(m) == m.filter(p)


@given(predicates(), maybes(anything()))
def test_exists(p, m):
    assert op.exists(p, m) == m.exists(p)
    assert op.exists(p)(m) == m.exists(p)


@given(maybes(unaries(anything())), maybes(anything()))
def test_ap(f, m):
    assert op.ap(f, m) == m.ap(f)
    assert op.ap(f)(m) == m.ap(f)


def test_cata():
    describe = op.cata(
        Catamorphism(
            just=lambda v: f'The value is {v}',
            nothing=lambda: 'There is no value'
        )
    )
    assert describe(Just(10)) == 'The value is 10'
    assert describe(Nothing()) == 'There is no value'


def test_assign():
    assert op.assign('a', Just(1), Just({})) == Just({'a': 1})
    assert op.assign('a')(Just(1))(Just({})) == Just({'a': 1})
    assert op.assign('a', Nothing())(Just({})) == Nothing()


def test_do_and_else_do():
    f = Mock()
    op.do(f)(Just(1))
    f.assert_called_once_with(1)

    g = Mock()
    assert op.else_do(g, Nothing()) == Nothing()
    g.assert_called_once_with()


@given(maybes(anything()))
def test_is_just_is_nothing(m):
    assert op.is_just(m) == m.is_just()
    assert op.is_nothing(m) == m.is_nothing()


def test_pipeline():
    parse = pipeline(
        from_nullable,
        op.map(int),
        op.filter(lambda v: v > 0),
        op.get_or_else_value(0)
    )
    assert parse('3') == 3
    assert parse('-3') == 0
    assert parse(None) == 0
