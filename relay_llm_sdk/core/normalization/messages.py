"""
Message normalization module.

Converts stored conversation history (Anthropic-style content blocks) into
OpenAI chat completions messages.
"""

import json
from typing import Any, Dict, List, Sequence

from ...models.conversation_types import MessageLike, get_field


def _block_to_dict(block: Any) -> Dict[str, Any]:
    if isinstance(block, dict):
        return block
    if hasattr(block, "model_dump"):
        return block.model_dump()
    return dict(vars(block))


def _image_part(block: Dict[str, Any]) -> Dict[str, Any]:
    source = block.get("source") or {}
    if source.get("type") == "url":
        url = source.get("url", "")
    else:
        url = f"data:{source.get('media_type', 'image/png')};base64,{source.get('data', '')}"
    return {"type": "image_url", "image_url": {"url": url}}


def _tool_result_text(content: Any) -> str:
    if isinstance(content, str):
        return content
    parts = []
    for part in content or []:
        part = _block_to_dict(part)
        if part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "\n".join(parts)


def _convert_user_blocks(role: str, blocks: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    tool_messages = []
    parts = []
    for block in blocks:
        block_type = block.get("type")
        if block_type == "tool_result":
            text = _tool_result_text(block.get("content"))
            if block.get("tool_use_id"):
                tool_messages.append({
                    "role": "tool",
                    "tool_call_id": block["tool_use_id"],
                    "content": text,
                })
            else:
                parts.append({"type": "text", "text": text})
        elif block_type == "image":
            parts.append(_image_part(block))
        elif block_type == "text":
            parts.append({"type": "text", "text": block.get("text", "")})

    # Tool results must directly follow the assistant turn that requested them
    converted = list(tool_messages)
    if parts:
        converted.append({"role": role, "content": parts})
    return converted


def _convert_assistant_blocks(blocks: List[Dict[str, Any]]) -> Dict[str, Any]:
    texts = []
    tool_calls = []
    for block in blocks:
        block_type = block.get("type")
        if block_type == "text":
            texts.append(block.get("text", ""))
        elif block_type == "tool_use" and block.get("id"):
            tool_calls.append({
                "id": block["id"],
                "type": "function",
                "function": {
                    "name": block.get("name", ""),
                    "arguments": json.dumps(block.get("input") or {}),
                },
            })
        # id-less tool_use blocks come from XML-protocol turns whose markup
        # is already part of the assistant text

    message: Dict[str, Any] = {"role": "assistant"}
    if tool_calls:
        message["content"] = "\n".join(texts) if texts else None
        message["tool_calls"] = tool_calls
    else:
        message["content"] = "\n".join(texts)
    return message


def transform_messages_for_provider(messages: Sequence[MessageLike]) -> List[Dict[str, Any]]:
    """
    Transform conversation history into OpenAI chat messages.

    Args:
        messages: ``ConversationMessage`` models or plain dicts, oldest first

    Returns:
        List of chat completions message dicts. Never mutates the input.
    """
    converted: List[Dict[str, Any]] = []
    for message in messages:
        role = get_field(message, "role")
        role = getattr(role, "value", role)
        content = get_field(message, "content")

        if isinstance(content, str):
            converted.append({"role": role, "content": content})
            continue
        if content is None:
            raise ValueError(f"Invalid message format: {type(message)} - {message}")

        blocks = [_block_to_dict(block) for block in content]
        if role == "assistant":
            converted.append(_convert_assistant_blocks(blocks))
        else:
            converted.extend(_convert_user_blocks(role, blocks))
    return converted
