import pytest

from abstract_factory import (
    AbstractFactory,
    AbstractProductA,
    AbstractProductB,
    FactoryRegistry,
)


class ProductA3(AbstractProductA):
    def useful_function_a(self):
        return "The result of the product A3."


class ProductB3(AbstractProductB):
    def useful_function_b(self):
        return "The result of the product B3."

    def another_useful_function_b(self, collaborator):
        return f"The result of the B3 collaborating with the ({collaborator.useful_function_a()})"


class Factory3(AbstractFactory):
    @property
    def variant(self):
        return "3"

    def create_product_a(self):
        return ProductA3()

    def create_product_b(self):
        return ProductB3()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # setenv first so values loaded from .env files during a test are undone too
    for name in ("DEMO_VARIANTS", "DEMO_FORMAT", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture(autouse=True)
def restore_registry():
    saved = dict(FactoryRegistry._FACTORIES)
    yield
    FactoryRegistry._FACTORIES.clear()
    FactoryRegistry._FACTORIES.update(saved)


@pytest.fixture
def third_factory():
    return Factory3()


@pytest.fixture
def registered_third_factory():
    FactoryRegistry.register_factory("3", Factory3)
    return Factory3
