"""
Data models and value objects.
"""

from .client_result import ClientResult

__all__ = ['ClientResult']
