"""
Concrete factories - one per product family variant.

Method signatures return the abstract product types while the bodies
instantiate the concrete variant.
"""

import logging

from .base_factory import AbstractFactory, FamilyVariant
from ..products import (
    AbstractProductA,
    AbstractProductB,
    ConcreteProductA1,
    ConcreteProductA2,
    ConcreteProductB1,
    ConcreteProductB2,
)

logger = logging.getLogger(__name__)


class ConcreteFactory1(AbstractFactory):
    """Factory for the first family: A1 and B1"""

    @property
    def variant(self) -> str:
        return FamilyVariant.FIRST.value

    def create_product_a(self) -> AbstractProductA:
        logger.debug("Creating ConcreteProductA1")
        return ConcreteProductA1()

    def create_product_b(self) -> AbstractProductB:
        logger.debug("Creating ConcreteProductB1")
        return ConcreteProductB1()


class ConcreteFactory2(AbstractFactory):
    """Factory for the second family: A2 and B2"""

    @property
    def variant(self) -> str:
        return FamilyVariant.SECOND.value

    def create_product_a(self) -> AbstractProductA:
        logger.debug("Creating ConcreteProductA2")
        return ConcreteProductA2()

    def create_product_b(self) -> AbstractProductB:
        logger.debug("Creating ConcreteProductB2")
        return ConcreteProductB2()
