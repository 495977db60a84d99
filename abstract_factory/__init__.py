"""
Abstract Factory Package

This package shows client code building families of related products
without depending on their concrete classes.

Architecture:
- Abstract Factory Pattern for product families
- Registry Pattern for plugging in new families
- Facade Pattern for the demo run
- Value Object Pattern for client results
"""

from .models import ClientResult
from .products import (
    AbstractProductA,
    AbstractProductB,
    ConcreteProductA1,
    ConcreteProductA2,
    ConcreteProductB1,
    ConcreteProductB2,
)
from .factories import AbstractFactory, FamilyVariant, ConcreteFactory1, ConcreteFactory2
from .repositories import FactoryRegistry
from .services import client_code, run_client, DemoResults, DemoService
from .formatters import DemoFormatter

__all__ = [
    # Models
    "ClientResult",
    # Products
    "AbstractProductA",
    "AbstractProductB",
    "ConcreteProductA1",
    "ConcreteProductA2",
    "ConcreteProductB1",
    "ConcreteProductB2",
    # Factories
    "AbstractFactory",
    "FamilyVariant",
    "ConcreteFactory1",
    "ConcreteFactory2",
    # Registry
    "FactoryRegistry",
    # Services
    "client_code",
    "run_client",
    "DemoResults",
    "DemoService",
    # Formatters
    "DemoFormatter",
]
