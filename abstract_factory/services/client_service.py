"""
Client Service - The client code and the demo run built on it.

The client works with factories and products only through their abstract
types, so any factory can be passed in without changing it.
"""

import logging
import sys
from typing import Iterator, List, Optional, TextIO, Tuple

from ..factories import AbstractFactory
from ..models import ClientResult
from ..repositories import FactoryRegistry
from ..config import DemoConfig

logger = logging.getLogger(__name__)


def run_client(factory: AbstractFactory) -> ClientResult:
    """
    Build a product pair from a factory and let them collaborate.

    Args:
        factory: Any AbstractFactory implementation

    Returns:
        ClientResult with Product B's two results

    Raises:
        TypeError: If factory is not an AbstractFactory
    """
    if not isinstance(factory, AbstractFactory):
        raise TypeError(f"Expected an AbstractFactory, got {type(factory).__name__}")

    product_a = factory.create_product_a()
    product_b = factory.create_product_b()

    return ClientResult(
        useful_function_b=product_b.useful_function_b(),
        another_useful_function_b=product_b.another_useful_function_b(product_a),
        variant=factory.variant,
    )


def client_code(factory: AbstractFactory, out: Optional[TextIO] = None) -> None:
    """
    Run the client against a factory and print Product B's results.

    Args:
        factory: Any AbstractFactory implementation
        out: Stream to write to (default: stdout)
    """
    stream = out or sys.stdout
    for line in run_client(factory).lines():
        print(line, file=stream)


class DemoResults:
    """
    Ordered client results, one per factory run.
    """

    def __init__(self):
        self._runs: List[Tuple[str, ClientResult]] = []

    def add_result(self, variant: str, result: ClientResult):
        """Add a run to the results"""
        self._runs.append((variant, result))

    def get_variants(self) -> List[str]:
        """Get variants in run order"""
        return [variant for variant, _ in self._runs]

    def get_result(self, variant: str) -> Optional[ClientResult]:
        """Get the first result for a variant"""
        for run_variant, result in self._runs:
            if run_variant == variant:
                return result
        return None

    def total_runs(self) -> int:
        return len(self._runs)

    def __iter__(self) -> Iterator[Tuple[str, ClientResult]]:
        return iter(self._runs)

    def __len__(self) -> int:
        return len(self._runs)


class DemoService:
    """
    Demo service - runs the same client code against several factories.

    Design Pattern: Facade Pattern
    Hides the registry and client routine behind a single run() call.
    """

    def __init__(self, variants: Optional[List[str]] = None):
        """
        Initialize demo service.

        Args:
            variants: Variants to run, in order. Defaults to DEMO_VARIANTS,
                then to every registered variant.
        """
        self._variants = list(variants or DemoConfig.get_variant_list()
                              or FactoryRegistry.get_supported_variants())

    @property
    def variants(self) -> List[str]:
        return list(self._variants)

    def run(self) -> DemoResults:
        """
        Run the client code once per configured variant.

        Returns:
            DemoResults in run order

        Raises:
            ValueError: If a variant is not registered
        """
        results = DemoResults()

        for variant in self._variants:
            factory = FactoryRegistry.create_factory(variant)
            result = run_client(factory)
            results.add_result(variant, result)
            logger.info(f"Client run complete for {factory!r}")

        logger.info(f"Demo complete. Total runs: {results.total_runs()}")
        return results
