"""Streaming and concurrent calls with the async Portkey client.

Prerequisites
-------------
    export PORTKEY_API_KEY="your-portkey-api-key"
    export PORTKEY_VIRTUAL_KEY="your-virtual-key"

Usage:
    python examples/async_streaming.py
"""

import asyncio
import os

from portkey_openai import AsyncClient


async def main() -> None:
    """Stream one answer, then run a few requests concurrently."""
    async with AsyncClient(os.environ["PORTKEY_API_KEY"], os.environ["PORTKEY_VIRTUAL_KEY"]) as client:
        print("--- Streaming tokens ---")
        stream = await client.chat.completions.create(
            model="gpt-4o-mini",
            messages=[{"role": "user", "content": "Tell me a two-sentence story about a fox."}],
            stream=True,
        )
        async for chunk in stream:
            if chunk.choices and chunk.choices[0].delta.content:
                print(chunk.choices[0].delta.content, end="", flush=True)
        print("\n")

        # One client can be shared by concurrent calls.
        print("--- Concurrent calls ---")
        questions = ["Capital of Japan?", "Capital of Italy?", "Capital of Peru?"]
        responses = await asyncio.gather(
            *(
                client.chat.completions.create(
                    model="gpt-4o-mini",
                    messages=[{"role": "user", "content": f"{q} One word."}],
                )
                for q in questions
            )
        )
        for question, response in zip(questions, responses):
            print(f"{question} {response.choices[0].message.content}")


asyncio.run(main())
