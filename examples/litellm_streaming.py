"""
Example: Streaming through a LiteLLM gateway

Resolves the tool protocol for a resumed conversation, then streams the next
turn and prints reasoning, text and usage events as they arrive.

Configure with LITELLM_BASE_URL, LITELLM_API_KEY and LITELLM_MODEL_ID.
"""

import asyncio
import logging

from relay_llm_sdk import (
    LiteLLMProvider,
    ReasoningEvent,
    TextEvent,
    UsageEvent,
    detect_tool_protocol_from_history,
    resolve_tool_protocol,
)

HISTORY = [
    {"role": "user", "content": "What files are in this directory?"},
    {
        "role": "assistant",
        "content": [
            {"type": "text", "text": "Let me check."},
            {"type": "tool_use", "id": "call_1", "name": "list_files", "input": {"path": "."}},
        ],
    },
    {"role": "user", "content": [{"type": "tool_result", "tool_use_id": "call_1", "content": "setup.py\nREADME.md"}]},
]

TOOLS = [{
    "type": "function",
    "function": {
        "name": "list_files",
        "description": "List files in a directory",
        "parameters": {"type": "object", "properties": {"path": {"type": "string"}}},
    },
}]


async def main():
    settings = {"apiProvider": "litellm", "toolProtocol": "xml"}
    locked = detect_tool_protocol_from_history(HISTORY)
    protocol = resolve_tool_protocol(settings, None, locked)
    print(f"Tool protocol for this turn: {protocol.value}\n")

    provider = LiteLLMProvider()
    async for event in provider.create_message(
        "You are a helpful coding assistant.",
        HISTORY,
        metadata={"tools": TOOLS, "tool_protocol": protocol},
    ):
        if isinstance(event, ReasoningEvent):
            print(f"[thinking] {event.text}", end="", flush=True)
        elif isinstance(event, TextEvent):
            print(event.text, end="", flush=True)
        elif isinstance(event, UsageEvent):
            print(f"\n\nTokens: {event.input_tokens} in / {event.output_tokens} out")
            if event.total_cost is not None:
                print(f"Cost: ${event.total_cost:.6f}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
