"""Event models for normalized streaming responses.

Provider adapters translate wire chunks into these events; consumers switch on
``type``. Events are plain values, so two events with the same payload compare
equal.
"""

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass
class TextEvent:
    """Assistant-visible text delta."""
    text: str
    type: str = field(default="text", init=False)


@dataclass
class ReasoningEvent:
    """Reasoning/thinking delta, whichever field alias the backend used."""
    text: str
    type: str = field(default="reasoning", init=False)


@dataclass
class UsageEvent:
    """Token usage reported by the provider.

    Cache counts are ``None`` when the provider did not report them.
    """
    input_tokens: int
    output_tokens: int
    cache_write_tokens: Optional[int] = None
    cache_read_tokens: Optional[int] = None
    total_cost: Optional[float] = None
    type: str = field(default="usage", init=False)


@dataclass
class ToolCallPartialEvent:
    """Fragment of a native tool call; arguments arrive as partial JSON text."""
    index: int
    id: Optional[str] = None
    name: Optional[str] = None
    arguments: Optional[str] = None
    type: str = field(default="tool_call_partial", init=False)


StreamEvent = Union[TextEvent, ReasoningEvent, UsageEvent, ToolCallPartialEvent]
