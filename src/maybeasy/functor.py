from abc import ABC, abstractmethod
from typing import Any, Callable


class Functor(ABC):
    """
    Abstract base class for containers that can be mapped over
    """
    @abstractmethod
    def map(self, f: Callable[[Any], Any]) -> 'Functor':
        """
        Map function ``f`` over the value wrapped by this functor

        Args:
            f: The function to apply to the wrapped value
        Return:
            New functor wrapping the result of applying ``f``
        """
        pass
