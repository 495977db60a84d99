"""
Product families - the objects every factory knows how to build.
Each product kind (A, B) has an abstract interface and one class per variant.
"""

from .base_product import AbstractProductA, AbstractProductB
from .product_a import ConcreteProductA1, ConcreteProductA2
from .product_b import ConcreteProductB1, ConcreteProductB2

__all__ = [
    'AbstractProductA',
    'AbstractProductB',
    'ConcreteProductA1',
    'ConcreteProductA2',
    'ConcreteProductB1',
    'ConcreteProductB2',
]
