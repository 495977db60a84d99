"""
Factory Registry - Registry Pattern implementation.
Maps family variant keys to factory classes and creates factories on demand.
"""

import logging
from typing import Dict, List, Type, Union

from ..factories import AbstractFactory, FamilyVariant, ConcreteFactory1, ConcreteFactory2

logger = logging.getLogger(__name__)


class FactoryRegistry:
    """
    Registry of product family factories.

    Design Pattern: Registry Pattern
    New families plug in through register_factory() without changing
    existing factories, products or client code.
    """

    # Factory registry, in registration order
    _FACTORIES: Dict[str, Type[AbstractFactory]] = {
        FamilyVariant.FIRST.value: ConcreteFactory1,
        FamilyVariant.SECOND.value: ConcreteFactory2,
    }

    @staticmethod
    def _key(variant: Union[FamilyVariant, str]) -> str:
        if isinstance(variant, FamilyVariant):
            return variant.value
        return str(variant).strip()

    @classmethod
    def create_factory(cls, variant: Union[FamilyVariant, str]) -> AbstractFactory:
        """
        Create a factory instance.

        Args:
            variant: Family variant enum member or its string key

        Returns:
            New factory instance

        Raises:
            ValueError: If the variant is not registered
        """
        key = cls._key(variant)
        factory_class = cls._FACTORIES.get(key)

        if not factory_class:
            raise ValueError(f"Unknown factory variant: {key}")

        logger.debug(f"Creating factory for variant: {key}")
        return factory_class()

    @classmethod
    def get_supported_variants(cls) -> List[str]:
        """
        Get list of registered variants.

        Returns:
            Variant keys in registration order
        """
        return list(cls._FACTORIES.keys())

    @classmethod
    def is_registered(cls, variant: Union[FamilyVariant, str]) -> bool:
        """Check if a variant has a registered factory"""
        return cls._key(variant) in cls._FACTORIES

    @classmethod
    def register_factory(cls, variant: Union[FamilyVariant, str], factory_class: Type[AbstractFactory]):
        """
        Register a new factory (for extensibility).

        Args:
            variant: Variant key
            factory_class: Factory class to register

        Raises:
            TypeError: If factory_class is not an AbstractFactory subclass
        """
        if not (isinstance(factory_class, type) and issubclass(factory_class, AbstractFactory)):
            raise TypeError(f"{factory_class!r} is not an AbstractFactory subclass")

        key = cls._key(variant)
        cls._FACTORIES[key] = factory_class
        logger.info(f"Registered factory for variant: {key}")

    @classmethod
    def unregister_factory(cls, variant: Union[FamilyVariant, str]):
        """
        Remove a registered factory.

        Raises:
            ValueError: If the variant is not registered
        """
        key = cls._key(variant)
        if key not in cls._FACTORIES:
            raise ValueError(f"Unknown factory variant: {key}")

        del cls._FACTORIES[key]
        logger.info(f"Unregistered factory for variant: {key}")
