"""
Base factory - Abstract base class using the Abstract Factory Pattern.
Declares the creation methods every product family must provide.
"""

from abc import ABC, abstractmethod
from enum import Enum

from ..products import AbstractProductA, AbstractProductB


class FamilyVariant(Enum):
    """Built-in product family variants"""
    FIRST = "1"
    SECOND = "2"


class AbstractFactory(ABC):
    """
    Abstract base class for product factories.

    Design Pattern: Abstract Factory
    A factory returns a family of related products. Products of one family
    are meant to be used together; signatures only expose the abstract
    product types, so client code never sees the concrete classes.

    Responsibilities:
    - Build a new Product A of the factory's variant
    - Build a new Product B of the same variant
    """

    @property
    @abstractmethod
    def variant(self) -> str:
        """Return the family variant this factory builds"""
        pass

    @abstractmethod
    def create_product_a(self) -> AbstractProductA:
        """
        Create a new Product A.

        Returns:
            Fresh product instance of this factory's variant
        """
        pass

    @abstractmethod
    def create_product_b(self) -> AbstractProductB:
        """
        Create a new Product B.

        Returns:
            Fresh product instance of this factory's variant
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(variant={self.variant!r})"
