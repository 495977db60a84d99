"""
Product B variants.

B1 only works correctly with A1 and B2 with A2, but both accept any
AbstractProductA. Pairing is left to the caller (normally a factory).
"""

from .base_product import AbstractProductA, AbstractProductB


class ConcreteProductB1(AbstractProductB):
    """Product B of the first family"""

    def useful_function_b(self) -> str:
        return "The result of the product B1."

    def another_useful_function_b(self, collaborator: AbstractProductA) -> str:
        result = collaborator.useful_function_a()
        return f"The result of the B1 collaborating with the ({result})"


class ConcreteProductB2(AbstractProductB):
    """Product B of the second family"""

    def useful_function_b(self) -> str:
        return "The result of the product B2."

    def another_useful_function_b(self, collaborator: AbstractProductA) -> str:
        result = collaborator.useful_function_a()
        return f"The result of the B2 collaborating with the ({result})"
