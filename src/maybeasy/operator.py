"""
Curried functions over `Maybe` values. Each takes the `Maybe` as its
last argument, so leaving it out gives back a function awaiting it::

    >>> from maybeasy import operator as op
    >>> add_one = op.map(lambda v: v + 1)
    >>> add_one(Just(1))
    Just(2)

`map` and `filter` shadow the builtins of the same name, so import
this module rather than its members.
"""
from typing import Any, Callable, TypeVar, Union

from .functions import Predicate, Unary, curry
from .maybe import Maybe
from .protocols import Matcher

A = TypeVar('A')
B = TypeVar('B')


@curry
def map(f: Unary[A, B], maybe: Maybe[A]) -> Maybe[B]:
    """
    Apply ``f`` to the value of ``maybe``, if it has one

    Example:
        >>> map(str, Just(5))
        Just('5')
        >>> map(str)(Nothing())
        Nothing()

    Args:
        f: function to apply
        maybe: `Maybe` to map over
    Return:
        `Just` wrapping the result of ``f``, or `Nothing`
    """
    return maybe.map(f)


@curry
def and_then(f: Unary[A, Maybe[B]], maybe: Maybe[A]) -> Maybe[B]:
    """
    Chain ``f`` onto ``maybe``

    Example:
        >>> half = lambda v: Just(v // 2) if v % 2 == 0 else Nothing()
        >>> and_then(half, Just(4))
        Just(2)
        >>> and_then(half)(Just(3))
        Nothing()

    Args:
        f: function returning a `Maybe`
        maybe: `Maybe` to chain from
    Return:
        result of ``f`` if ``maybe`` is a `Just`, `Nothing` otherwise
    """
    return maybe.and_then(f)


@curry
def or_else(f: Callable[[], Maybe[B]],
            maybe: Maybe[A]) -> Maybe[Union[A, B]]:
    """
    Replace a `Nothing` by the result of ``f``

    Example:
        >>> or_else(lambda: Just(0), Nothing())
        Just(0)
    """
    return maybe.or_else(f)


@curry
def get_or_else(f: Callable[[], B], maybe: Maybe[A]) -> Union[A, B]:
    """
    Get the value of ``maybe``, or ``f()`` if it is `Nothing`

    Example:
        >>> get_or_else(lambda: 10, Nothing())
        10
        >>> get_or_else(lambda: 10)(Just(5))
        5
    """
    return maybe.get_or_else(f)


@curry
def get_or_else_value(default: B, maybe: Maybe[A]) -> Union[A, B]:
    """
    Get the value of ``maybe``, or ``default`` if it is `Nothing`

    Example:
        >>> get_or_else_value(10, Nothing())
        10
        >>> get_or_else_value(10)(Just(5))
        5
    """
    return maybe.get_or_else_value(default)


@curry
def cata(matcher: Matcher[A, B], maybe: Maybe[A]) -> B:
    """
    Fold ``maybe`` with ``matcher``

    Example:
        >>> describe = cata(Catamorphism(
        ...     just=lambda v: f'The value is {v}',
        ...     nothing=lambda: 'There is no value'
        ... ))
        >>> describe(Just(10))
        'The value is 10'
        >>> describe(Nothing())
        'There is no value'
    """
    return maybe.cata(matcher)


@curry
def filter(f: Predicate[A], maybe: Maybe[A]) -> Maybe[A]:
    """
    Keep the value of ``maybe`` only if it satisfies ``f``

    Example:
        >>> greater_than_three = filter(lambda v: v > 3)
        >>> greater_than_three(Just(5))
        Just(5)
        >>> greater_than_three(Just(2))
        Nothing()
    """
    return maybe.filter(f)


@curry
def exists(f: Predicate[A], maybe: Maybe[A]) -> bool:
    """
    Test the value of ``maybe`` with ``f``. `Nothing` never satisfies ``f``

    Example:
        >>> exists(lambda v: v > 3, Just(5))
        True
        >>> exists(lambda v: v > 3, Nothing())
        False
    """
    return maybe.exists(f)


@curry
def ap(f: Maybe[Unary[A, B]], maybe: Maybe[A]) -> Maybe[B]:
    """
    Apply the function wrapped by ``f`` to the value wrapped by ``maybe``

    Example:
        >>> add_one = ap(Just(lambda v: v + 1))
        >>> add_one(Just(5))
        Just(6)
        >>> add_one(Nothing())
        Nothing()
    """
    return maybe.ap(f)


@curry
def assign(key: str,
           other: Union[Maybe[B], Unary[Any, Maybe[B]]],
           maybe: Maybe[Any]) -> Maybe[Any]:
    """
    Add ``key`` to the mapping wrapped by ``maybe``

    Example:
        >>> assign('a', Just(1), Just({}))
        Just({'a': 1})
    """
    return maybe.assign(key, other)


@curry
def do(f: Unary[A, Any], maybe: Maybe[A]) -> Maybe[A]:
    """
    Call ``f`` with the value of ``maybe`` for its side effect
    """
    return maybe.do(f)


@curry
def else_do(f: Callable[[], Any], maybe: Maybe[A]) -> Maybe[A]:
    """
    Call ``f`` if ``maybe`` is `Nothing`, for its side effect
    """
    return maybe.else_do(f)


def is_just(maybe: Maybe[Any]) -> bool:
    return maybe.is_just()


def is_nothing(maybe: Maybe[Any]) -> bool:
    return maybe.is_nothing()


__all__ = [
    'map',
    'and_then',
    'or_else',
    'get_or_else',
    'get_or_else_value',
    'cata',
    'filter',
    'exists',
    'ap',
    'assign',
    'do',
    'else_do',
    'is_just',
    'is_nothing'
]
