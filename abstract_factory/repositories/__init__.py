"""
Repositories and registries - Registry Pattern implementation.
"""

from .factory_registry import FactoryRegistry

__all__ = ['FactoryRegistry']
