from typing import Callable, Dict, List, Tuple, TypeVar, Union

from .maybe import Just, Maybe, Nothing

try:
    from hypothesis.strategies import (
        booleans,
        builds,
        composite,
        dictionaries,
        floats,
        integers,
        just,
        lists as lists_,
        one_of,
        text,
        SearchStrategy
    )
except ImportError:
    raise ImportError(
        'Could not import hypothesis. To use maybeasy.hypothesis_strategies, '
        'install maybeasy with \n\n\tpip install maybeasy[test]'
    )

A = TypeVar('A')
B = TypeVar('B')


def _everything(allow_nan: bool = False) -> Tuple[SearchStrategy[int],
                                                  SearchStrategy[bool],
                                                  SearchStrategy[str],
                                                  SearchStrategy[float]]:
    return integers(), booleans(), text(), floats(allow_nan=allow_nan)


def anything(allow_nan: bool = False
             ) -> SearchStrategy[Union[int, bool, str, float]]:
    """
    Create a search strategy that produces one of int, bool, str or floats.

    Args:
        allow_nan: whether to allow nan values
    Return:
        Search strategy that produces ints, bools, str or floats
    """
    return one_of(*_everything(allow_nan))


def unaries(return_strategy: SearchStrategy[A]
            ) -> SearchStrategy[Callable[[object], A]]:
    """
    Create a search strategy that produces functions of 1 argument

    Example:
        >>> f = unaries(integers()).example()
        >>> f(None)
        2
    Args:
        return_strategy: strategy used to draw return values
    Return:
        Search strategy that produces callables of 1 argument
    """
    @composite
    def _(draw):
        a: A = draw(return_strategy)
        return lambda _: a

    return _()


def nullaries(return_strategy: SearchStrategy[A]
              ) -> SearchStrategy[Callable[[], A]]:
    """
    Create a search strategy that produces functions of no arguments

    Example:
        >>> f = nullaries(integers()).example()
        >>> f()
        2
    Args:
        return_strategy: strategy used to draw return values
    Return:
        Search strategy that produces callables of no arguments
    """
    def f(v):
        return lambda: v

    return builds(f, return_strategy)


def predicates() -> SearchStrategy[Callable[[object], bool]]:
    """
    Create a search strategy that produces constant predicates

    Example:
        >>> p = predicates().example()
        >>> p(1)
        False
    """
    return unaries(booleans())


def justs(value_strategy: SearchStrategy[A]
          ) -> SearchStrategy[Just[A]]:
    """
    Create a search strategy that produces `Just` values

    Example:
        >>> justs(integers()).example()
        Just(1)
    """
    return builds(Just, value_strategy)


def maybes(value_strategy: SearchStrategy[A]
           ) -> SearchStrategy[Maybe[A]]:
    """
    Create a search strategy that produces `Maybe` values

    Example:
        >>> maybes(integers()).example()
        Just(1)
    Args:
        value_strategy: search strategy to draw values from
    Return:
        search strategy that produces `Just` and `Nothing` values
    """
    nothings = just(Nothing())
    return one_of(justs(value_strategy), nothings)


def lists(elements: SearchStrategy[A],
          min_size: int = 0,
          max_size: int = 10) -> SearchStrategy[List[A]]:
    """
    Create a search strategy that produces lists

    Args:
        elements: strategy to draw elements from
        min_size: minimum size of the lists
        max_size: maximum size of the lists
    Example:
        >>> lists(maybes(integers())).example()
        [Just(0), Nothing()]
    Return:
        search strategy that produces lists
    """
    return lists_(elements, min_size=min_size, max_size=max_size)


def records(keys: SearchStrategy[str],
            values: SearchStrategy[B],
            min_size: int = 0,
            max_size: int = 5) -> SearchStrategy[Dict[str, B]]:
    """
    Create a search strategy that produces dicts usable with `Maybe.assign`

    Args:
        keys: strategy to draw field names from
        values: strategy to draw field values from
        min_size: minimum number of fields
        max_size: max number of fields
    Example:
        >>> records(text(), integers()).example()
        {'': 0}
    Return:
        search strategy that produces dicts
    """
    return dictionaries(keys, values, min_size=min_size, max_size=max_size)


__all__ = [
    'anything',
    'unaries',
    'nullaries',
    'predicates',
    'justs',
    'maybes',
    'lists',
    'records'
]
