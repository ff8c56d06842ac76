"""
Relay LLM SDK - tool protocol policy and stream normalization for
OpenAI-compatible gateways.

This package provides:
- Tool protocol resolution (locked protocol, user preference, native default)
- Tool protocol detection from stored conversation history
- Provider adapters (LiteLLM, generic OpenAI-compatible) that build
  model-family-aware requests and normalize streamed chunks into
  text/reasoning/usage events
"""

__version__ = "0.1.0"

from .core.capabilities import ModelCatalog, ModelInfo, StaticModelCatalog
from .core.protocol import detect_tool_protocol_from_history, resolve_tool_protocol
from .config.options import ProviderOptions
from .models.conversation_types import ConversationMessage
from .models.conversation_types import TurnRole as ConversationRole
from .models.events import ReasoningEvent, StreamEvent, TextEvent, ToolCallPartialEvent, UsageEvent
from .models.protocol import ProviderSettings, ToolProtocol
from .providers import LiteLLMProvider, OpenAICompatibleProvider, ProviderAdapter, ProviderError

__all__ = [
    # Protocol policy
    "resolve_tool_protocol",
    "detect_tool_protocol_from_history",
    "ToolProtocol",
    "ProviderSettings",

    # Providers
    "ProviderAdapter",
    "ProviderError",
    "LiteLLMProvider",
    "OpenAICompatibleProvider",
    "ProviderOptions",

    # Model metadata
    "ModelCatalog",
    "ModelInfo",
    "StaticModelCatalog",

    # Messages and events
    "ConversationMessage",
    "ConversationRole",
    "StreamEvent",
    "TextEvent",
    "ReasoningEvent",
    "UsageEvent",
    "ToolCallPartialEvent",
]
