from abc import ABC, abstractmethod


class FunctorTest(ABC):
    """
    Laws every mappable container must satisfy
    """

    @abstractmethod
    def test_equality(self, *args):
        raise NotImplementedError()

    @abstractmethod
    def test_inequality(self, *args):
        raise NotImplementedError()

    @abstractmethod
    def test_identity_law(self, *args):
        raise NotImplementedError()

    @abstractmethod
    def test_composition_law(self, *args):
        raise NotImplementedError()

    @abstractmethod
    def test_absorption_law(self, *args):
        """map over the empty case never calls the function"""
        raise NotImplementedError()
