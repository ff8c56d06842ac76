from __future__ import annotations

from enum import Enum
from typing import Dict, Literal, Tuple, Type

from ..models.events import ReasoningEvent, TextEvent

DeltaKind = Literal["reasoning", "text"]


class StreamState(str, Enum):
    """Lifecycle of a single normalized stream."""
    NOT_STARTED = "not_started"
    STREAMING = "streaming"
    COMPLETED = "completed"


# Delta fields checked on every chunk, in emission order. Backends disagree on
# the name of the reasoning field; adding an alias is a one-line change here.
DELTA_FIELD_KINDS: Tuple[Tuple[str, DeltaKind], ...] = (
    ("reasoning", "reasoning"),
    ("thinking", "reasoning"),
    ("reasoning_content", "reasoning"),
    ("content", "text"),
)

EVENT_TYPES: Dict[DeltaKind, Type] = {
    "reasoning": ReasoningEvent,
    "text": TextEvent,
}
