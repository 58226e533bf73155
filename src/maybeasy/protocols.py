from typing import TypeVar

from typing_extensions import Protocol

A = TypeVar('A', contravariant=True)
B = TypeVar('B', covariant=True)


class Emptyable(Protocol):
    def __len__(self) -> int:
        pass


class Matcher(Protocol[A, B]):
    """
    Anything with a handler per `Maybe` case. Used by `Maybe.cata`
    """
    def just(self, value: A) -> B:
        pass

    def nothing(self) -> B:
        pass
