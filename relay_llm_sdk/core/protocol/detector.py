"""
Tool protocol detection from conversation history.

The structure of stored ``tool_use`` blocks tells the protocols apart:

- Native protocol: tool_use blocks always carry an ``id``
- XML protocol: tool_use blocks never carry an ``id``

Resumed tasks must continue with the protocol their last tool call used, even
if the user's settings changed since, because the next tool result has to
match what the model last emitted.
"""

from typing import Any, Optional, Sequence

from ..sequences import find_last, find_last_index
from ...models.conversation_types import MessageLike, get_field
from ...models.protocol import ToolProtocol

TOOL_USE_BLOCK_TYPE = "tool_use"


def is_tool_use_block(block: Any) -> bool:
    return get_field(block, "type") == TOOL_USE_BLOCK_TYPE


def is_assistant_message_with_tool_use(message: Any) -> bool:
    if get_field(message, "role") != "assistant":
        return False
    content = get_field(message, "content")
    if isinstance(content, (str, bytes)) or not isinstance(content, Sequence):
        return False
    return any(is_tool_use_block(block) for block in content)


def detect_tool_protocol_from_history(messages: Sequence[MessageLike]) -> Optional[ToolProtocol]:
    """
    Detect the tool protocol used by the most recent tool call in ``messages``.

    Args:
        messages: Conversation history, oldest first. Items may be
            ``ConversationMessage`` models or plain dicts.

    Returns:
        ``ToolProtocol.NATIVE`` or ``ToolProtocol.XML``, or None when no
        assistant message contains a tool_use block. None means "no opinion";
        callers fall back to ``resolve_tool_protocol``.
    """
    last_assistant_with_tool = find_last(messages, is_assistant_message_with_tool_use)
    if last_assistant_with_tool is None:
        return None

    content = get_field(last_assistant_with_tool, "content")
    last_tool_use_index = find_last_index(content, is_tool_use_block)
    if last_tool_use_index == -1:
        return None

    last_tool_use = content[last_tool_use_index]
    return ToolProtocol.NATIVE if get_field(last_tool_use, "id") else ToolProtocol.XML
