"""
Product A variants.
"""

from .base_product import AbstractProductA


class ConcreteProductA1(AbstractProductA):
    """Product A of the first family"""

    def useful_function_a(self) -> str:
        return "The result of the product A1."


class ConcreteProductA2(AbstractProductA):
    """Product A of the second family"""

    def useful_function_a(self) -> str:
        return "The result of the product A2."
