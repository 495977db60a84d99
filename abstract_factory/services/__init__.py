"""
Services - client code and the demo facade.
"""

from .client_service import client_code, run_client, DemoResults, DemoService

__all__ = ['client_code', 'run_client', 'DemoResults', 'DemoService']
