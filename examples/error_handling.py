"""Handling gateway errors raised by the OpenAI SDK.

The Portkey client does not translate errors: authentication failures,
rate limits and network problems surface as the ``openai`` SDK's own
exception types.

Prerequisites
-------------
    export PORTKEY_API_KEY="your-portkey-api-key"
    export PORTKEY_VIRTUAL_KEY="your-virtual-key"

Usage:
    python examples/error_handling.py
"""

import os
import time

import openai

from portkey_openai import Client

client = Client(os.environ["PORTKEY_API_KEY"], os.environ["PORTKEY_VIRTUAL_KEY"])


def call_with_retry(prompt, max_retries=3, base_delay=1.0):
    """Call the model, backing off exponentially on rate limiting.

    Args:
        prompt: The user prompt to send.
        max_retries: Maximum number of attempts.
        base_delay: Initial delay in seconds between attempts.

    Returns:
        The assistant's reply text.

    Raises:
        openai.RateLimitError: If all attempts are throttled.
    """
    for attempt in range(max_retries):
        try:
            response = client.chat.completions.create(
                model="gpt-4o-mini",
                messages=[{"role": "user", "content": prompt}],
            )
            return response.choices[0].message.content
        except openai.RateLimitError:
            if attempt == max_retries - 1:
                raise
            delay = base_delay * (2**attempt)
            print(f"  Throttled on attempt {attempt + 1}. Retrying in {delay:.1f}s...")
            time.sleep(delay)
    return None


try:
    print(call_with_retry("What is 2 + 2?"))
except openai.AuthenticationError as e:
    print(f"Portkey rejected the credentials: {e}")
except openai.APIConnectionError as e:
    print(f"Could not reach the gateway: {e}")
finally:
    client.close()
