"""
Demo formatter - Displays each client run under a header.

Text output format:
Client: Testing client code with the first factory type:
The result of the product B1.
The result of the B1 collaborating with the (The result of the product A1.)

Client: Testing the same client code with the second factory type:
...
"""

import json
from .base_formatter import OutputFormatter
from ..services.client_service import DemoResults

_ORDINALS = ("first", "second", "third", "fourth", "fifth")


class DemoFormatter(OutputFormatter):
    """
    Formatter for demo runs as text or JSON.

    Design Pattern: Strategy Pattern implementation
    """

    def __init__(self, output_format: str = "text"):
        """
        Initialize formatter.

        Args:
            output_format: Output format type ('text', 'json')

        Raises:
            ValueError: If the format is not supported
        """
        if output_format not in ("text", "json"):
            raise ValueError(f"Unknown output format: {output_format}")
        self.output_format = output_format

    def format(self, results: DemoResults) -> str:
        if self.output_format == "json":
            return self._format_json(results)
        return self._format_text(results)

    @staticmethod
    def _header(index: int) -> str:
        ordinal = _ORDINALS[index] if index < len(_ORDINALS) else "next"
        if index == 0:
            return f"Client: Testing client code with the {ordinal} factory type:"
        return f"Client: Testing the same client code with the {ordinal} factory type:"

    def _format_text(self, results: DemoResults) -> str:
        """Format as header plus client lines, runs separated by a blank line"""
        blocks = []
        for index, (_, result) in enumerate(results):
            blocks.append("\n".join([self._header(index)] + result.lines()))
        return "\n\n".join(blocks)

    def _format_json(self, results: DemoResults) -> str:
        """Format as JSON list of runs"""
        output = {
            "runs": [
                {
                    "variant": variant,
                    "useful_function_b": result.useful_function_b,
                    "another_useful_function_b": result.another_useful_function_b,
                }
                for variant, result in results
            ],
            "total_runs": results.total_runs(),
        }
        return json.dumps(output, indent=2)
