"""Basic chat completion through the Portkey gateway.

Prerequisites
-------------
1. A Portkey account and API key (https://app.portkey.ai/).
2. A *virtual key* that wraps your provider API key -- create one in the
   Portkey dashboard under "Virtual Keys".

Set the following environment variables before running:

    export PORTKEY_API_KEY="your-portkey-api-key"
    export PORTKEY_VIRTUAL_KEY="your-virtual-key"

Usage:
    python examples/basic_chat.py
"""

import os

from portkey_openai import Client

# ---------------------------------------------------------------------------
# 1. Create the Portkey-backed client
# ---------------------------------------------------------------------------
# Every request made through this client targets the Portkey gateway and
# carries the API key and virtual key headers.
client = Client(os.environ["PORTKEY_API_KEY"], os.environ["PORTKEY_VIRTUAL_KEY"])

# ---------------------------------------------------------------------------
# 2. Use the regular OpenAI SDK call shapes
# ---------------------------------------------------------------------------
with client:
    response = client.chat.completions.create(
        # ``model`` tells Portkey which model to invoke on the provider side.
        model="gpt-4o-mini",
        messages=[
            {"role": "system", "content": "You are a concise assistant."},
            {"role": "user", "content": "What is the capital of France?"},
        ],
    )
    print(response.choices[0].message.content)

    # The underlying ``openai.OpenAI`` client is available for anything else.
    print(client.openai.base_url)
