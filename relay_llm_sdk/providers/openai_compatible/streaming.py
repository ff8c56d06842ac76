from __future__ import annotations

import inspect
from typing import Any, AsyncGenerator

from ...models.events import StreamEvent
from ...streaming import StreamAdapter


async def close_stream(stream: Any) -> None:
    """Release the upstream stream (async generators and openai ``AsyncStream``)."""
    aclose = getattr(stream, "aclose", None)
    if aclose is not None:
        await aclose()
        return
    close = getattr(stream, "close", None)
    if close is not None:
        result = close()
        if inspect.isawaitable(result):
            await result


async def stream_chat_completions(
    stream: Any,
    adapter: StreamAdapter,
) -> AsyncGenerator[StreamEvent, None]:
    """Yield normalized events from a chat completions chunk stream.

    Each chunk's events are yielded before the next chunk is pulled. The
    upstream stream is closed when the source is exhausted, when a terminal
    usage-only chunk completes the stream, or when the consumer stops early.
    """
    try:
        async for chunk in stream:
            for event in adapter.normalize_chunk(chunk):
                yield event
            if adapter.is_completed:
                break
    finally:
        adapter.complete_stream()
        await close_stream(stream)
