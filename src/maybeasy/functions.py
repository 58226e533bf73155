import functools
import inspect
from typing import Any, Callable, Tuple, TypeVar

from .immutable import Immutable

A = TypeVar('A')
B = TypeVar('B')

Unary = Callable[[A], B]
Predicate = Callable[[A], bool]


def identity(v: A) -> A:
    """
    The identity function. Gives back its argument unchanged,
    which makes it the neutral element of `Maybe.map`

    Example:
        >>> Just(1).map(identity)
        Just(1)

    Args:
        v: The value to get back

    Return:
        `v`
    """
    return v


class Composition(Immutable):
    functions: Tuple[Callable, ...]

    def __call__(self, *args, **kwargs):
        first, *rest = reversed(self.functions)
        result = first(*args, **kwargs)
        for f in rest:
            result = f(result)
        return result


def compose(
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    *functions: Callable[[Any], Any]
) -> Callable[[Any], Any]:
    """
    Compose functions so that the rightmost is applied first

    Example:
        >>> inc = lambda v: v + 1
        >>> compose(str, inc)(1)
        '2'

    Args:
        f: the outermost function in the composition
        g: the function to be composed with f
        functions: functions to be composed with `f` \
        and `g` from left to right

    Return:
        `f` composed with `g` composed with `functions`
    """
    return Composition((f, g) + functions)


def pipeline(
    first: Callable[[Any], Any],
    second: Callable[[Any], Any],
    *rest: Callable[[Any], Any]
) -> Callable[[Any], Any]:
    """
    Compose functions so that the leftmost is applied first.
    Combined with the curried functions in `maybeasy.operator`
    this reads as a left-to-right chain over a `Maybe`

    Example:
        >>> from maybeasy import operator as op
        >>> parse = pipeline(
        ...     from_nullable,
        ...     op.map(int),
        ...     op.get_or_else_value(0)
        ... )
        >>> parse('3')
        3
        >>> parse(None)
        0

    Args:
        first: the innermost function in the composition
        second: the function applied to the result of `first`
        rest: functions applied after `second`, from left to right

    Return:
        `first`, `second` and `rest` composed from left to right
    """
    return compose(*reversed(rest), second, first)


class Curry:
    _f: Callable

    def __init__(self, f: Callable):
        functools.wraps(f)(self)
        self._f = f  # type: ignore

    def __repr__(self):
        return repr(self._f)

    def __call__(self, *args, **kwargs):
        signature = inspect.signature(self._f)
        bound = signature.bind_partial(*args, **kwargs)
        bound.apply_defaults()
        missing = set(signature.parameters) - set(bound.arguments)
        if not missing:
            return self._f(*args, **kwargs)
        return Curry(functools.partial(self._f, *args, **kwargs))


def curry(f: Callable) -> Callable:
    """
    Get a version of ``f`` that can be partially applied.
    Calling it with fewer arguments than ``f`` requires returns
    a function awaiting the rest

    Example:
        >>> get_or_else_value = curry(
        ...     lambda default, m: m.get_or_else_value(default)
        ... )
        >>> get_or_zero = get_or_else_value(0)
        >>> get_or_zero(Just(2))
        2
        >>> get_or_zero(Nothing())
        0

    Args:
        f: The function to curry
    Return:
        Curried version of ``f``
    """
    @functools.wraps(f)
    def decorator(*args, **kwargs):
        return Curry(f)(*args, **kwargs)

    return decorator


__all__ = ['curry', 'compose', 'pipeline', 'identity', 'Unary', 'Predicate']
