from abc import ABC, abstractmethod
from typing import Any, Callable

from .functor import Functor


class Monad(Functor, ABC):
    """
    Base class for containers that can be chained
    """
    @abstractmethod
    def and_then(self, f: Callable[[Any], Any]) -> 'Monad':
        pass

    @abstractmethod
    def ap(self, f: 'Monad') -> 'Monad':
        """
        Apply the function wrapped by ``f`` to the value wrapped by
        this monad
        """
        pass
