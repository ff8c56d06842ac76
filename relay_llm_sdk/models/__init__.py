from .conversation_types import (
    ContentBlock,
    ConversationMessage,
    ImageBlock,
    TextBlock,
    ToolResultBlock,
    ToolUseBlock,
    TurnRole,
)
from .events import ReasoningEvent, StreamEvent, TextEvent, ToolCallPartialEvent, UsageEvent
from .protocol import ProviderSettings, ToolProtocol, coerce_tool_protocol

__all__ = [
    "ContentBlock",
    "ConversationMessage",
    "ImageBlock",
    "TextBlock",
    "ToolResultBlock",
    "ToolUseBlock",
    "TurnRole",
    "ReasoningEvent",
    "StreamEvent",
    "TextEvent",
    "ToolCallPartialEvent",
    "UsageEvent",
    "ProviderSettings",
    "ToolProtocol",
    "coerce_tool_protocol",
]
