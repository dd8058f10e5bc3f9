"""Shared pytest fixtures for live gateway tests."""

import pytest
import pytest_asyncio

from portkey_openai import AsyncClient, Client

from ._helpers import MODEL_ID, PORTKEY_API_KEY, PORTKEY_VIRTUAL_KEY


@pytest.fixture
def model_id():
    return MODEL_ID


@pytest.fixture
def client():
    with Client(PORTKEY_API_KEY, PORTKEY_VIRTUAL_KEY) as c:
        yield c


@pytest_asyncio.fixture
async def async_client():
    async with AsyncClient(PORTKEY_API_KEY, PORTKEY_VIRTUAL_KEY) as c:
        yield c
