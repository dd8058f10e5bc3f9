"""Portkey-configured OpenAI clients."""

from ._config import API_KEY_HEADER, PORTKEY_BASE_URL, VIRTUAL_KEY_HEADER, PortkeyCredentials
from .client import AsyncClient, Client

__all__ = [
    "API_KEY_HEADER",
    "PORTKEY_BASE_URL",
    "VIRTUAL_KEY_HEADER",
    "AsyncClient",
    "Client",
    "PortkeyCredentials",
]
