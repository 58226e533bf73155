from dataclasses import dataclass


class Immutable:
    """
    Super class that turns subclasses into frozen dataclasses.
    Fields are declared as class annotations.

    Example:
        >>> class Pair(Immutable):
        ...     first: int
        ...     second: int
        >>> p = Pair(1, 2)
        >>> p.first = 3
        dataclasses.FrozenInstanceError: cannot assign to field 'first'

    """

    def __init_subclass__(cls,
                          init: bool = True,
                          repr: bool = True,
                          eq: bool = True,
                          order: bool = False) -> None:
        super().__init_subclass__()
        if not hasattr(cls, '__annotations__'):
            cls.__annotations__ = {}
        dataclass(
            frozen=True, init=init, repr=repr, eq=eq, order=order
        )(cls)


__all__ = ['Immutable']
