"""
Output formatters - Strategy Pattern for different output formats.
"""

from .base_formatter import OutputFormatter
from .demo_formatter import DemoFormatter

__all__ = ['OutputFormatter', 'DemoFormatter']
