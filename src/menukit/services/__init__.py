"""
Services - The host boundary.

The menu layer reaches widgets only through IHostAPI. InMemoryHost and
MockHost have no Qt dependencies; QtHost renders real controls.
"""

from .interfaces import IHostAPI, Handle
from .host_service import InMemoryHost, MockHost, HostWidget

__all__ = [
    # Interfaces
    "IHostAPI",
    "Handle",
    # Hosts
    "InMemoryHost",
    "HostWidget",
    # Mocks for testing
    "MockHost",
]
