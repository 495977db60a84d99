"""
Base output formatter - Abstract base class for formatters.
"""

from abc import ABC, abstractmethod
from ..services.client_service import DemoResults


class OutputFormatter(ABC):
    """
    Abstract base class for output formatters.

    Design Pattern: Strategy Pattern
    """

    @abstractmethod
    def format(self, results: DemoResults) -> str:
        """
        Format demo results for output.

        Args:
            results: Demo results to format

        Returns:
            Formatted string for output
        """
        pass
