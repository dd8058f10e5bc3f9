"""Shared test fixtures for Portkey client tests."""

import pytest


@pytest.fixture
def portkey_api_key():
    return "test-portkey-api-key"


@pytest.fixture
def portkey_virtual_key():
    return "test-virtual-key"


@pytest.fixture
def chat_completion_payload():
    """Minimal chat completion body as returned by the gateway."""
    return {
        "id": "chatcmpl-123",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-4o-mini",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": "Hello from Portkey"},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 5, "completion_tokens": 4, "total_tokens": 9},
    }
