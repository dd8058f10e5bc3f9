"""Pydantic credentials model and gateway constants for Portkey clients."""

from portkey_ai import PORTKEY_GATEWAY_URL, createHeaders
from pydantic import BaseModel, ConfigDict, Field, SecretStr

PORTKEY_BASE_URL = PORTKEY_GATEWAY_URL

API_KEY_HEADER = "x-portkey-api-key"
VIRTUAL_KEY_HEADER = "x-portkey-virtual-key"


class PortkeyCredentials(BaseModel):
    """Immutable Portkey credentials.

    Values are opaque: no length or format checks are made. They are held as
    ``SecretStr`` so they are masked in ``repr()`` and log output.

    Attributes:
        api_key: Portkey API key.
        virtual_key: Virtual key selecting the provider routing on the gateway.
    """

    model_config = ConfigDict(frozen=True)

    api_key: SecretStr = Field(..., description="Portkey API key")
    virtual_key: SecretStr = Field(..., description="Portkey virtual key")

    def headers(self) -> dict[str, str]:
        """Render the Portkey request headers.

        Returns:
            A new dict holding exactly the API key and virtual key headers.
        """
        return createHeaders(
            api_key=self.api_key.get_secret_value(),
            virtual_key=self.virtual_key.get_secret_value(),
        )
