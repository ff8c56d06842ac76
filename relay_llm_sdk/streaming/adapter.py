from __future__ import annotations

import time
from typing import Any, Dict, List, Optional

from .types import DELTA_FIELD_KINDS, EVENT_TYPES, StreamState
from ..core.capabilities.models import ModelInfo
from ..core.normalization.usage import normalize_usage
from ..models.conversation_types import get_field
from ..models.events import StreamEvent, ToolCallPartialEvent
from ..observability.logging import ProviderLogger


class StreamAdapter:
    """Translates chat completions chunks into normalized stream events.

    One adapter serves one request. Each chunk maps to zero or more events in
    a fixed order (reasoning aliases, content, tool call fragments, usage);
    nothing is buffered across chunks. Malformed delta fields are dropped and
    counted, never raised.
    """

    def __init__(
        self,
        provider: str,
        model: Optional[str] = None,
        model_info: Optional[ModelInfo] = None,
        logger: Optional[ProviderLogger] = None,
        request_id: Optional[str] = None,
    ):
        """Initialize StreamAdapter.

        Args:
            provider: Name of the provider (litellm, openai-compatible)
            model: Model id, used in log lines
            model_info: Model metadata for usage cost calculation
            logger: Provider logger for dropped-field diagnostics
            request_id: Request id attached to log lines
        """
        self.provider = provider.lower()
        self.model = model
        self.model_info = model_info
        self.state = StreamState.NOT_STARTED
        self._logger = logger or ProviderLogger(self.provider)
        self._request_id = request_id
        self._start_time: Optional[float] = None
        self._chunk_count = 0
        self._event_count = 0
        self._total_chars = 0
        self._dropped_fields = 0

    def start_stream(self):
        """Mark the start of streaming."""
        self._start_time = time.time()
        self.state = StreamState.STREAMING

    def complete_stream(self):
        """Mark the stream as finished; later chunks are ignored."""
        self.state = StreamState.COMPLETED

    @property
    def is_completed(self) -> bool:
        return self.state == StreamState.COMPLETED

    def normalize_chunk(self, chunk: Any) -> List[StreamEvent]:
        """Normalize one provider chunk into events, in emission order.

        A chunk with usage and no choices is the terminal usage chunk and
        completes the stream.
        """
        if self.state == StreamState.NOT_STARTED:
            self.start_stream()
        elif self.state == StreamState.COMPLETED:
            return []

        self._chunk_count += 1
        events: List[StreamEvent] = []

        choices = get_field(chunk, "choices")
        has_choices = isinstance(choices, (list, tuple)) and len(choices) > 0
        if has_choices:
            delta = get_field(choices[0], "delta")
            if delta is not None:
                events.extend(self._normalize_delta(delta))
                events.extend(self._normalize_tool_calls(delta))

        usage = get_field(chunk, "usage")
        if usage is not None:
            events.append(normalize_usage(usage, self.model_info))
            if not has_choices:
                self.complete_stream()

        self._event_count += len(events)
        return events

    def _normalize_delta(self, delta: Any) -> List[StreamEvent]:
        events: List[StreamEvent] = []
        for field_name, kind in DELTA_FIELD_KINDS:
            value = get_field(delta, field_name)
            if value is None:
                continue
            if not isinstance(value, str):
                self._record_dropped(field_name, value)
                continue
            if value:
                self._total_chars += len(value)
                events.append(EVENT_TYPES[kind](text=value))
        return events

    def _normalize_tool_calls(self, delta: Any) -> List[StreamEvent]:
        tool_calls = get_field(delta, "tool_calls")
        if not isinstance(tool_calls, (list, tuple)):
            return []

        events: List[StreamEvent] = []
        for tool_call in tool_calls:
            index = get_field(tool_call, "index")
            if isinstance(index, bool) or not isinstance(index, int):
                self._record_dropped("tool_calls", tool_call)
                continue
            function = get_field(tool_call, "function")
            name = get_field(function, "name") if function is not None else None
            arguments = get_field(function, "arguments") if function is not None else None
            call_id = get_field(tool_call, "id")
            events.append(ToolCallPartialEvent(
                index=index,
                id=call_id if isinstance(call_id, str) else None,
                name=name if isinstance(name, str) else None,
                arguments=arguments if isinstance(arguments, str) else None,
            ))
        return events

    def _record_dropped(self, field_name: str, value: Any):
        self._dropped_fields += 1
        self._logger.debug(
            "Dropped malformed delta field",
            model=self.model,
            request_id=self._request_id,
            field=field_name,
            value_type=type(value).__name__,
        )

    def get_metrics(self) -> Dict[str, Any]:
        """Get streaming metrics.

        Returns:
            Dictionary with streaming metrics
        """
        duration = time.time() - self._start_time if self._start_time else 0
        return {
            "state": self.state.value,
            "chunks": self._chunk_count,
            "events": self._event_count,
            "dropped_fields": self._dropped_fields,
            "total_chars": self._total_chars,
            "duration_seconds": duration,
            "chunks_per_second": self._chunk_count / duration if duration > 0 else 0,
        }
