import logging
from abc import ABC, abstractmethod
from functools import wraps
from typing import (Any, Callable, Generic, Iterable, List, Mapping, TypeVar,
                    Union)

from .functions import curry
from .immutable import Immutable
from .monad import Monad
from .protocols import Emptyable, Matcher

logger = logging.getLogger(__name__)

A = TypeVar('A', covariant=True)
B = TypeVar('B')
C = TypeVar('C')
E = TypeVar('E', bound=Emptyable)


class Maybe_(Immutable, Monad, ABC):
    """
    Abstract super class for values that may be absent.
    Should not be instantiated directly.
    Use `Just` and `Nothing` instead.

    """
    @abstractmethod
    def and_then(self, f: Callable) -> Any:
        """
        Chain together computations that may produce nothing.
        ``f`` is only called when this is a `Just`, and its
        result is returned as is.

        Example:
            >>> f = lambda i: Just(1 / i) if i != 0 else Nothing()
            >>> Just(2).and_then(f)
            Just(0.5)
            >>> Just(0).and_then(f)
            Nothing()
            >>> Nothing().and_then(f)
            Nothing()

        Args:
            f: the function to call with the wrapped value

        Return:
            The result of ``f`` if this is a `Just`, `Nothing` otherwise

        """
        raise NotImplementedError()

    @abstractmethod
    def map(self, f: Callable) -> Any:
        """
        Transform the wrapped value, if there is one

        Example:
            >>> Just(1).map(str)
            Just('1')
            >>> Nothing().map(str)
            Nothing()

        Args:
            f: Function to apply to the wrapped value

        Return:
            `Just` wrapping the result of ``f`` if this is a `Just`, \
            `Nothing` otherwise

        """
        raise NotImplementedError()

    @abstractmethod
    def or_else(self, f: Callable) -> Any:
        """
        Recover from absence with an alternative `Maybe`

        Example:
            >>> Just(1).or_else(lambda: Just(2))
            Just(1)
            >>> Nothing().or_else(lambda: Just(2))
            Just(2)

        Args:
            f: Function producing the alternative, only called on `Nothing`
        Return:
            This instance if it is a `Just`, the result of ``f()`` otherwise

        """
        raise NotImplementedError()

    @abstractmethod
    def get_or_else(self, f: Callable) -> Any:
        """
        Get the wrapped value, computing a fallback when there is none

        Example:
            >>> Just(1).get_or_else(lambda: 2)
            1
            >>> Nothing().get_or_else(lambda: 2)
            2

        Args:
            f: Function producing the fallback, only called on `Nothing`
        Return:
            The wrapped value if this is a `Just`, ``f()`` otherwise

        """
        raise NotImplementedError()

    @abstractmethod
    def get_or_else_value(self, default: Any) -> Any:
        """
        Get the wrapped value or ``default``

        Example:
            >>> Just(1).get_or_else_value(2)
            1
            >>> Nothing().get_or_else_value(2)
            2

        Args:
            default: Value to return if this is `Nothing`
        Return:
            The wrapped value if this is a `Just`, ``default`` otherwise

        """
        raise NotImplementedError()

    @abstractmethod
    def cata(self, matcher: Matcher) -> Any:
        """
        Fold this `Maybe` into a single value with one handler per case

        Example:
            >>> describe = Catamorphism(
            ...     just=lambda v: f'got {v}',
            ...     nothing=lambda: 'got nothing'
            ... )
            >>> Just(1).cata(describe)
            'got 1'
            >>> Nothing().cata(describe)
            'got nothing'

        Args:
            matcher: object with a ``just`` and a ``nothing`` handler
        Return:
            ``matcher.just(value)`` if this is a `Just`, \
            ``matcher.nothing()`` otherwise

        """
        raise NotImplementedError()

    @abstractmethod
    def filter(self, f: Callable) -> Any:
        """
        Keep the wrapped value only if it satisfies ``f``

        Example:
            >>> Just(5).filter(lambda v: v > 3)
            Just(5)
            >>> Just(5).filter(lambda v: v > 10)
            Nothing()

        Args:
            f: predicate to test the wrapped value with
        Return:
            This instance if it is a `Just` whose value satisfies ``f``, \
            `Nothing` otherwise

        """
        raise NotImplementedError()

    @abstractmethod
    def exists(self, f: Callable) -> bool:
        """
        Test the wrapped value without unwrapping it

        Example:
            >>> Just(5).exists(lambda v: v > 3)
            True
            >>> Nothing().exists(lambda v: v > 3)
            False

        Args:
            f: predicate to test the wrapped value with
        Return:
            True if this is a `Just` whose value satisfies ``f``

        """
        raise NotImplementedError()

    @abstractmethod
    def ap(self, f: Any) -> Any:
        """
        Apply a function wrapped in a `Maybe` to the wrapped value

        Example:
            >>> Just(5).ap(Just(lambda v: v + 1))
            Just(6)
            >>> Just(5).ap(Nothing())
            Nothing()

        Args:
            f: `Maybe` wrapping a function of one argument
        Return:
            `Just` wrapping the function applied to the value if both are \
            `Just`, `Nothing` otherwise

        """
        raise NotImplementedError()

    @abstractmethod
    def assign(self, key: str, other: Any) -> Any:
        """
        Add a field to a wrapped mapping. ``other`` is either a `Maybe`
        or a function of the current mapping that returns one.
        Use it to build up a record one field at a time without
        nesting `and_then` calls.

        Example:
            >>> record = Just({}).assign('a', Just(1))
            >>> record.assign('b', lambda d: Just(d['a'] + 1))
            Just({'a': 1, 'b': 2})
            >>> Just({}).assign('a', Nothing())
            Nothing()
            >>> Just(1).assign('a', Just(2))
            Nothing()

        Args:
            key: name of the new field
            other: `Maybe` or function returning the `Maybe` \
                holding the field value
        Return:
            `Just` wrapping a new mapping with ``key`` added if \
            both sides are `Just`, `Nothing` otherwise. A `Just` \
            wrapping anything but a mapping also gives `Nothing`

        """
        raise NotImplementedError()

    @abstractmethod
    def do(self, f: Callable) -> Any:
        """
        Call ``f`` with the wrapped value for its side effect

        Example:
            >>> Just(1).do(print)
            1
            Just(1)

        Args:
            f: function to call if this is a `Just`
        Return:
            This instance

        """
        raise NotImplementedError()

    @abstractmethod
    def else_do(self, f: Callable) -> Any:
        """
        Call ``f`` with no arguments for its side effect if this is `Nothing`

        Example:
            >>> Nothing().else_do(lambda: print('missing'))
            missing
            Nothing()

        Args:
            f: function to call if this is `Nothing`
        Return:
            This instance

        """
        raise NotImplementedError()

    @abstractmethod
    def is_just(self) -> bool:
        raise NotImplementedError()

    @abstractmethod
    def is_nothing(self) -> bool:
        raise NotImplementedError()

    @abstractmethod
    def __bool__(self) -> bool:
        """
        Convert to a bool

        Example:
            >>> 'Just' if Just(1) else 'Nothing'
            'Just'
            >>> 'Just' if Nothing() else 'Nothing'
            'Nothing'

        Return:
            True if this is a `Just` value, \
                 False if this is a `Nothing`

        """
        raise NotImplementedError()


class Catamorphism(Immutable, Generic[B, C]):
    """
    A pair of handlers, one per `Maybe` case, for `Maybe.cata`
    """
    just: Callable[[B], C]
    nothing: Callable[[], C]


class Just(Maybe_, Generic[A]):
    """
    Represents a present value

    """
    get: A
    """
    The wrapped value
    """

    def and_then(self, f: Callable[[A], 'Maybe[B]']) -> 'Maybe[B]':
        return f(self.get)

    def map(self, f: Callable[[A], B]) -> 'Maybe[B]':
        return Just(f(self.get))

    def or_else(self, f: Callable[[], 'Maybe[B]']) -> 'Maybe[Union[A, B]]':
        return self

    def get_or_else(self, f: Callable[[], B]) -> Union[A, B]:
        return self.get

    def get_or_else_value(self, default: B) -> Union[A, B]:
        return self.get

    def cata(self, matcher: Matcher[A, B]) -> B:
        return matcher.just(self.get)

    def filter(self, f: Callable[[A], bool]) -> 'Maybe[A]':
        return self if f(self.get) else _nothing

    def exists(self, f: Callable[[A], bool]) -> bool:
        return bool(f(self.get))

    def ap(self, f: 'Maybe[Callable[[A], B]]') -> 'Maybe[B]':
        return f.map(lambda g: g(self.get))

    def assign(
        self: 'Just[Mapping[str, Any]]',
        key: str,
        other: Union['Maybe[B]', Callable[[Mapping[str, Any]], 'Maybe[B]']]
    ) -> 'Maybe[Mapping[str, Any]]':
        if not isinstance(self.get, Mapping):
            return _nothing
        other_maybe = other if isinstance(other, Maybe_) else other(self.get)
        return other_maybe.map(lambda v: {**self.get, key: v})

    def do(self, f: Callable[[A], Any]) -> 'Maybe[A]':
        f(self.get)
        return self

    def else_do(self, f: Callable[[], Any]) -> 'Maybe[A]':
        return self

    def is_just(self) -> bool:
        return True

    def is_nothing(self) -> bool:
        return False

    def __eq__(self, other: Any) -> bool:
        """
        Test if other is a ``Just`` wrapping an equal value

        Args:
            other: Value to compare with
        Return:
            True if other is a ``Just`` and its wrapped value equals the \
        wrapped value of this instance

        """
        if not isinstance(other, Just):
            return False
        return other.get == self.get

    def __repr__(self):
        return f'Just({repr(self.get)})'

    def __bool__(self):
        return True


class Nothing(Maybe_):
    """
    Represents an absent value

    """
    def and_then(self, f: Callable[[Any], 'Maybe[B]']) -> 'Maybe[B]':
        return self

    def map(self, f: Callable[[Any], B]) -> 'Maybe[B]':
        return self

    def or_else(self, f: Callable[[], 'Maybe[B]']) -> 'Maybe[B]':
        return f()

    def get_or_else(self, f: Callable[[], B]) -> B:
        return f()

    def get_or_else_value(self, default: B) -> B:
        return default

    def cata(self, matcher: Matcher[Any, B]) -> B:
        return matcher.nothing()

    def filter(self, f: Callable[[Any], bool]) -> 'Maybe[Any]':
        return self

    def exists(self, f: Callable[[Any], bool]) -> bool:
        return False

    def ap(self, f: 'Maybe[Callable[[Any], B]]') -> 'Maybe[B]':
        return self

    def assign(self, key: str, other: Any) -> 'Maybe[Any]':
        return self

    def do(self, f: Callable[[Any], Any]) -> 'Maybe[Any]':
        return self

    def else_do(self, f: Callable[[], Any]) -> 'Maybe[Any]':
        f()
        return self

    def is_just(self) -> bool:
        return False

    def is_nothing(self) -> bool:
        return True

    def __eq__(self, other: Any) -> bool:
        """
        Test if other is a ``Nothing``

        Args:
            other: Value to compare with
        Return:
            True if other is a ``Nothing``, False otherwise

        """
        return isinstance(other, Nothing)

    def __repr__(self) -> str:
        return 'Nothing()'

    def __bool__(self) -> bool:
        return False


Maybe = Union[Nothing, Just[A]]
"""
Type-alias for `Union[Nothing, Just[TypeVar('A')]]`
"""

_nothing = Nothing()


def just(value: B) -> Maybe[B]:
    """
    Wrap ``value`` in a `Just`

    Example:
        >>> just(1)
        Just(1)
    """
    return Just(value)


def nothing() -> Maybe[Any]:
    """
    Get the shared `Nothing` instance

    Example:
        >>> nothing()
        Nothing()
    """
    return _nothing


def maybe(f: Callable[..., B]) -> Callable[..., Maybe[B]]:
    """
    Wrap a function that may raise an exception with a `Maybe`.
    Can also be used as a decorator.

    Example:
        >>> to_int = maybe(int)
        >>> to_int("1")
        Just(1)
        >>> to_int("Whoops")
        Nothing()

    Args:
        f: Function to wrap
    Return:
        f wrapped with a `Maybe`

    """
    @wraps(f)
    def dec(*args, **kwargs):
        try:
            return Just(f(*args, **kwargs))
        except Exception:
            logger.debug(
                'call to %s raised, returning Nothing()',
                getattr(f, '__qualname__', repr(f)),
                exc_info=True
            )
            return _nothing

    return dec


def from_nullable(value: Union[B, None]) -> Maybe[B]:
    """
    Convert a possible ``None`` value to a `Maybe`.
    Only ``None`` counts as absent; falsy values such as ``0``
    or ``''`` are wrapped

    Example:
        >>> from_nullable('value')
        Just('value')
        >>> from_nullable(0)
        Just(0)
        >>> from_nullable(None)
        Nothing()

    Args:
        value: optional value to convert
    Return:
        `Just(value)` if ``value`` is not ``None``, `Nothing` otherwise
    """
    if value is None:
        return _nothing
    return Just(value)


def from_empty(xs: E) -> Maybe[E]:
    """
    Convert a sized value to a `Maybe`, treating an empty one as absent

    Example:
        >>> from_empty([1, 2])
        Just([1, 2])
        >>> from_empty('')
        Nothing()

    Args:
        xs: anything with a length
    Return:
        `Nothing` if ``len(xs) == 0``, `Just(xs)` otherwise
    """
    return _nothing if len(xs) == 0 else Just(xs)


def flatten(maybes: Iterable[Maybe[B]]) -> List[B]:
    """
    Extract the value from each `Just`, skipping `Nothing` elements

    Example:
        >>> flatten([Just(1), Nothing(), Just(2)])
        [1, 2]

    Args:
        maybes: Iterable of `Maybe`
    Return:
        list of unwrapped values
    """
    return [m.get for m in maybes if isinstance(m, Just)]


def sequence(iterable: Iterable[Maybe[B]]) -> Maybe[List[B]]:
    """
    Collect the values of an iterable of `Maybe` from left to right.
    Stops at the first `Nothing`; the rest of the iterable is not consumed

    Example:
        >>> sequence([Just(v) for v in range(3)])
        Just([0, 1, 2])
        >>> sequence([Just(1), Nothing(), Just(3)])
        Nothing()

    Args:
        iterable: The `Maybe` values to collect
    Return:
        `Just` of the collected values if all are `Just`, `Nothing` otherwise
    """
    values = []
    for m in iterable:
        if isinstance(m, Nothing):
            return m
        values.append(m.get)
    return Just(values)


@curry
def traverse(f: Callable[[C], Maybe[B]],
             iterable: Iterable[C]) -> Maybe[List[B]]:
    """
    Map each element in ``iterable`` to a `Maybe` by applying ``f``
    and collect the results from left to right. ``f`` is not called
    on elements that follow the first `Nothing`

    Example:
        >>> traverse(lambda n: Just(n * 2), [1, 2, 3])
        Just([2, 4, 6])
        >>> traverse(lambda n: Just(n) if n % 2 == 0 else Nothing(), [1, 2])
        Nothing()

    Args:
        f: Function to map over ``iterable``
        iterable: Iterable to map ``f`` over
    Return:
        `Just` of the mapped values if ``f`` returned `Just` for every \
        element, `Nothing` otherwise
    """
    return sequence(f(x) for x in iterable)


__all__ = [
    'Maybe',
    'Just',
    'Nothing',
    'Catamorphism',
    'just',
    'nothing',
    'maybe',
    'from_nullable',
    'from_empty',
    'flatten',
    'sequence',
    'traverse'
]
