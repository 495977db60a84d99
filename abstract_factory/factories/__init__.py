"""
Factory implementations - Abstract Factory Pattern.
Each concrete factory builds one coherent family of products.
"""

from .base_factory import AbstractFactory, FamilyVariant
from .concrete_factories import ConcreteFactory1, ConcreteFactory2

__all__ = [
    'AbstractFactory',
    'FamilyVariant',
    'ConcreteFactory1',
    'ConcreteFactory2',
]
