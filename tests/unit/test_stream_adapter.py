"""Unit tests for stream chunk normalization."""

import logging

import pytest
from openai.types.chat import ChatCompletionChunk

from relay_llm_sdk.core.capabilities import DEFAULT_MODEL_INFO
from relay_llm_sdk.models.events import ReasoningEvent, TextEvent, ToolCallPartialEvent, UsageEvent
from relay_llm_sdk.providers.openai_compatible.streaming import stream_chat_completions
from relay_llm_sdk.streaming import StreamAdapter, StreamState
from tests.helpers.streaming_mocks import TrackingStream, create_chat_stream, make_chunk


@pytest.fixture
def adapter():
    return StreamAdapter("litellm", model="gpt-4")


class TestDeltaNormalization:

    @pytest.mark.parametrize("field", ["reasoning", "thinking", "reasoning_content"])
    def test_reasoning_aliases(self, adapter, field):
        events = adapter.normalize_chunk(make_chunk({field: "Let me think about this..."}))
        assert events == [ReasoningEvent(text="Let me think about this...")]

    def test_content_becomes_text(self, adapter):
        events = adapter.normalize_chunk(make_chunk({"content": "Hello"}))
        assert events == [TextEvent(text="Hello")]
        assert events[0].type == "text"

    def test_fixed_emission_order(self, adapter):
        events = adapter.normalize_chunk(make_chunk({
            "content": "answer",
            "reasoning_content": "c",
            "thinking": "b",
            "reasoning": "a",
        }))
        assert events == [
            ReasoningEvent(text="a"),
            ReasoningEvent(text="b"),
            ReasoningEvent(text="c"),
            TextEvent(text="answer"),
        ]

    def test_empty_strings_skipped(self, adapter):
        assert adapter.normalize_chunk(make_chunk({"content": "", "reasoning": ""})) == []

    def test_non_string_fields_dropped_and_counted(self, adapter):
        events = adapter.normalize_chunk(make_chunk({
            "reasoning": {"summary": "x"},
            "thinking": 42,
            "content": "kept",
        }))
        assert events == [TextEvent(text="kept")]
        assert adapter.get_metrics()["dropped_fields"] == 2

    def test_dropped_field_logged_at_debug(self, adapter, caplog):
        with caplog.at_level(logging.DEBUG, logger="relay_llm_sdk"):
            adapter.normalize_chunk(make_chunk({"reasoning": ["not", "text"]}))
        assert "Dropped malformed delta field" in caplog.text
        assert "field=reasoning" in caplog.text

    def test_missing_choices_and_delta(self, adapter):
        assert adapter.normalize_chunk({}) == []
        assert adapter.normalize_chunk({"choices": [{"index": 0}]}) == []
        assert adapter.normalize_chunk({"choices": [{"delta": {"role": "assistant"}}]}) == []

    def test_only_first_choice_read(self, adapter):
        chunk = {"choices": [{"delta": {"content": "one"}}, {"delta": {"content": "two"}}]}
        assert adapter.normalize_chunk(chunk) == [TextEvent(text="one")]


class TestUsageChunks:

    def test_usage_only_chunk_completes_stream(self, adapter):
        adapter.normalize_chunk(make_chunk({"reasoning": "thinking"}))
        events = adapter.normalize_chunk({"usage": {"prompt_tokens": 10, "completion_tokens": 5}})

        assert events == [UsageEvent(input_tokens=10, output_tokens=5)]
        assert adapter.is_completed
        assert adapter.normalize_chunk(make_chunk({"content": "late"})) == []

    def test_usage_with_choices_does_not_complete(self, adapter):
        chunk = make_chunk({"content": "Hi"}, usage={"prompt_tokens": 3, "completion_tokens": 1})
        events = adapter.normalize_chunk(chunk)

        assert events == [TextEvent(text="Hi"), UsageEvent(input_tokens=3, output_tokens=1)]
        assert adapter.state == StreamState.STREAMING

    def test_usage_cost_uses_model_info(self):
        adapter = StreamAdapter("litellm", model_info=DEFAULT_MODEL_INFO)
        events = adapter.normalize_chunk(make_chunk(usage={"prompt_tokens": 1000, "completion_tokens": 1000}))
        assert events[0].total_cost == pytest.approx(0.018)

    def test_state_transitions(self, adapter):
        assert adapter.state == StreamState.NOT_STARTED
        adapter.normalize_chunk(make_chunk({"content": "a"}))
        assert adapter.state == StreamState.STREAMING
        adapter.complete_stream()
        assert adapter.state == StreamState.COMPLETED


class TestToolCallFragments:

    def test_tool_call_fragments(self, adapter):
        first = adapter.normalize_chunk(make_chunk({"tool_calls": [{
            "index": 0, "id": "call_1", "type": "function",
            "function": {"name": "read_file", "arguments": ""},
        }]}))
        second = adapter.normalize_chunk(make_chunk({"tool_calls": [{
            "index": 0, "function": {"arguments": "{\"path\": \"a.py\"}"},
        }]}))

        assert first == [ToolCallPartialEvent(index=0, id="call_1", name="read_file", arguments="")]
        assert second == [ToolCallPartialEvent(index=0, arguments="{\"path\": \"a.py\"}")]

    def test_tool_call_without_index_dropped(self, adapter):
        events = adapter.normalize_chunk(make_chunk({"tool_calls": [{"function": {"name": "x"}}]}))
        assert events == []
        assert adapter.get_metrics()["dropped_fields"] == 1

    def test_text_precedes_tool_calls(self, adapter):
        events = adapter.normalize_chunk(make_chunk({
            "content": "Calling tool",
            "tool_calls": [{"index": 0, "id": "call_1", "function": {"name": "t", "arguments": "{}"}}],
        }))
        assert [event.type for event in events] == ["text", "tool_call_partial"]


class TestSdkChunks:
    """Chunks parsed by the openai SDK, not plain dicts."""

    def test_sdk_chunk_objects(self, adapter):
        chunk = ChatCompletionChunk.model_validate({
            "id": "chatcmpl-1",
            "object": "chat.completion.chunk",
            "created": 1700000000,
            "model": "gpt-4",
            "choices": [{"index": 0, "delta": {"content": "Hello", "reasoning_content": "hmm"}, "finish_reason": None}],
        })
        usage_chunk = ChatCompletionChunk.model_validate({
            "id": "chatcmpl-1",
            "object": "chat.completion.chunk",
            "created": 1700000000,
            "model": "gpt-4",
            "choices": [],
            "usage": {"prompt_tokens": 12, "completion_tokens": 4, "total_tokens": 16},
        })

        assert adapter.normalize_chunk(chunk) == [ReasoningEvent(text="hmm"), TextEvent(text="Hello")]
        assert adapter.normalize_chunk(usage_chunk) == [UsageEvent(input_tokens=12, output_tokens=4)]
        assert adapter.is_completed


class TestStreamChatCompletions:

    @pytest.mark.asyncio
    async def test_events_in_arrival_order(self, adapter):
        stream = create_chat_stream([
            make_chunk({"reasoning": "Let me think about this..."}),
            make_chunk({"content": "Answer"}),
            make_chunk(usage={"prompt_tokens": 10, "completion_tokens": 5}),
        ])
        events = [event async for event in stream_chat_completions(stream, adapter)]

        assert events == [
            ReasoningEvent(text="Let me think about this..."),
            TextEvent(text="Answer"),
            UsageEvent(input_tokens=10, output_tokens=5),
        ]

    @pytest.mark.asyncio
    async def test_interleaved_reasoning_aliases_keep_order(self, adapter):
        stream = create_chat_stream([
            make_chunk({"reasoning": "r1"}),
            make_chunk({"content": "t1"}),
            make_chunk({"thinking": "r2"}),
            make_chunk({"content": "t2"}),
            make_chunk(usage={"prompt_tokens": 8, "completion_tokens": 4}),
        ])
        events = [event async for event in stream_chat_completions(stream, adapter)]

        assert events == [
            ReasoningEvent(text="r1"),
            TextEvent(text="t1"),
            ReasoningEvent(text="r2"),
            TextEvent(text="t2"),
            UsageEvent(input_tokens=8, output_tokens=4),
        ]

    @pytest.mark.asyncio
    async def test_stops_pulling_after_terminal_usage_chunk(self, adapter):
        stream = TrackingStream([
            make_chunk({"content": "a"}),
            make_chunk(usage={"prompt_tokens": 1, "completion_tokens": 1}),
            make_chunk({"content": "never read"}),
        ])
        events = [event async for event in stream_chat_completions(stream, adapter)]

        assert TextEvent(text="never read") not in events
        assert stream.pulled == 2
        assert stream.closed

    @pytest.mark.asyncio
    async def test_early_close_closes_upstream(self, adapter):
        stream = TrackingStream([make_chunk({"content": str(i)}) for i in range(5)])
        events = stream_chat_completions(stream, adapter)

        first = await events.__anext__()
        await events.aclose()

        assert first == TextEvent(text="0")
        assert stream.pulled == 1
        assert stream.closed
        assert adapter.is_completed

    @pytest.mark.asyncio
    async def test_source_exhaustion_completes(self, adapter):
        stream = create_chat_stream([make_chunk({"content": "only"})])
        events = [event async for event in stream_chat_completions(stream, adapter)]

        assert events == [TextEvent(text="only")]
        assert adapter.is_completed
        assert adapter.get_metrics()["chunks"] == 1
