"""
Client result data model - Value Object pattern.
Immutable record of what the client routine produced for one factory.
"""

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class ClientResult:
    """
    Immutable client run output.

    Attributes:
        useful_function_b: Result of Product B's own work
        another_useful_function_b: Result of Product B collaborating with Product A
        variant: Variant of the factory that built the products, if known
    """
    useful_function_b: str
    another_useful_function_b: str
    variant: Optional[str] = None

    def lines(self) -> List[str]:
        """Lines emitted by the client, in order"""
        return [self.useful_function_b, self.another_useful_function_b]
