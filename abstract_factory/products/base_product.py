"""
Base product interfaces - Abstract base classes for each product kind.
Every variant of a product family must implement these interfaces.
"""

from abc import ABC, abstractmethod


class AbstractProductA(ABC):
    """
    Interface for the first product kind.

    Products hold no state; a variant is identified only by what it returns.
    """

    @abstractmethod
    def useful_function_a(self) -> str:
        """Return the result identifying this variant"""
        pass


class AbstractProductB(ABC):
    """
    Interface for the second product kind.

    Product B does its own work but can also collaborate with a Product A.
    Proper interaction is only meaningful between products of the same
    variant, yet any AbstractProductA is accepted as a collaborator.
    """

    @abstractmethod
    def useful_function_b(self) -> str:
        """Return the result identifying this variant"""
        pass

    @abstractmethod
    def another_useful_function_b(self, collaborator: AbstractProductA) -> str:
        """
        Collaborate with a Product A.

        Args:
            collaborator: Any Product A, matching variant or not

        Returns:
            Result string embedding the collaborator's result
        """
        pass
