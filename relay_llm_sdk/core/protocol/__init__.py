"""Tool protocol resolution and history-based detection."""

from .detector import detect_tool_protocol_from_history
from .resolver import coerce_tool_protocol, resolve_tool_protocol

__all__ = [
    "detect_tool_protocol_from_history",
    "resolve_tool_protocol",
    "coerce_tool_protocol",
]
