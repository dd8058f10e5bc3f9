"""OpenAI SDK clients pre-configured for the Portkey AI gateway.

- Docs: https://portkey.ai/docs
"""

import logging
from typing import Any, Optional, Union

import httpx
from openai import AsyncOpenAI, OpenAI
from openai.resources.chat import AsyncChat, Chat
from typing_extensions import Self

from ._config import PORTKEY_BASE_URL, PortkeyCredentials

logger = logging.getLogger(__name__)


def _drop_environment_defaults(client: Union[OpenAI, AsyncOpenAI]) -> None:
    """Clear the organization and project the OpenAI SDK reads from the environment.

    ``OPENAI_ORG_ID`` and ``OPENAI_PROJECT_ID`` would otherwise be sent to the gateway
    as ``OpenAI-Organization`` and ``OpenAI-Project`` headers.
    """
    client.organization = None
    client.project = None


class _BaseClient:
    """Credential and gateway accessors shared by the sync and async clients."""

    def __init__(self, api_key: str, virtual_key: str) -> None:
        """Store the credentials.

        Raises:
            pydantic.ValidationError: If either credential is not a string.
        """
        self._credentials = PortkeyCredentials(api_key=api_key, virtual_key=virtual_key)

        logger.debug("base_url=<%s>, credentials=<%s> | initializing", PORTKEY_BASE_URL, self._credentials)

    @property
    def credentials(self) -> PortkeyCredentials:
        """The immutable credentials this client was built with."""
        return self._credentials

    @property
    def api_key(self) -> str:
        """The Portkey API key."""
        return self._credentials.api_key.get_secret_value()

    @property
    def virtual_key(self) -> str:
        """The Portkey virtual key."""
        return self._credentials.virtual_key.get_secret_value()

    @property
    def base_url(self) -> str:
        """The Portkey gateway URL every request targets."""
        return PORTKEY_BASE_URL

    @property
    def headers(self) -> dict[str, str]:
        """The headers added to every request, as a fresh copy."""
        return self._credentials.headers()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r}, credentials={self._credentials!r})"


class Client(_BaseClient):
    """Synchronous Portkey client.

    Wraps an ``openai.OpenAI`` instance whose base URL is the Portkey gateway and
    whose default headers carry the Portkey API key and virtual key. Requests are
    made through :attr:`openai` (or the :attr:`chat` shortcut) using the OpenAI
    SDK's own call shapes; nothing is reshaped here.

    Example:
        >>> client = Client("pk-...", "vk-...")
        >>> client.chat.completions.create(model="gpt-4o-mini", messages=[...])
    """

    def __init__(self, api_key: str, virtual_key: str, *, http_client: Optional[httpx.Client] = None) -> None:
        """Create a client routed through Portkey.

        Args:
            api_key: Portkey API key.
            virtual_key: Portkey virtual key.
            http_client: Optional ``httpx.Client`` used as the OpenAI SDK transport.

        Raises:
            pydantic.ValidationError: If either credential is not a string.
        """
        super().__init__(api_key, virtual_key)
        self._openai = OpenAI(
            api_key=self.api_key,
            base_url=PORTKEY_BASE_URL,
            default_headers=self.headers,
            http_client=http_client,
        )
        _drop_environment_defaults(self._openai)

    @property
    def openai(self) -> OpenAI:
        """The underlying OpenAI client configured for Portkey."""
        return self._openai

    @property
    def chat(self) -> Chat:
        """The OpenAI chat resource (``chat.completions``)."""
        return self._openai.chat

    def close(self) -> None:
        """Close the underlying OpenAI client and its HTTP transport."""
        logger.debug("closing client")
        self._openai.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class AsyncClient(_BaseClient):
    """Asynchronous Portkey client wrapping ``openai.AsyncOpenAI``.

    Same configuration as :class:`Client`; calls on :attr:`openai` are awaitable.
    """

    def __init__(
        self,
        api_key: str,
        virtual_key: str,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """Create an async client routed through Portkey.

        Args:
            api_key: Portkey API key.
            virtual_key: Portkey virtual key.
            http_client: Optional ``httpx.AsyncClient`` used as the OpenAI SDK transport.

        Raises:
            pydantic.ValidationError: If either credential is not a string.
        """
        super().__init__(api_key, virtual_key)
        self._openai = AsyncOpenAI(
            api_key=self.api_key,
            base_url=PORTKEY_BASE_URL,
            default_headers=self.headers,
            http_client=http_client,
        )
        _drop_environment_defaults(self._openai)

    @property
    def openai(self) -> AsyncOpenAI:
        """The underlying async OpenAI client configured for Portkey."""
        return self._openai

    @property
    def chat(self) -> AsyncChat:
        """The async OpenAI chat resource (``chat.completions``)."""
        return self._openai.chat

    async def close(self) -> None:
        """Close the underlying async OpenAI client and its HTTP transport."""
        logger.debug("closing async client")
        await self._openai.close()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
