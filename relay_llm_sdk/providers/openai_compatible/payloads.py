import copy
from typing import Any, Dict, List, Optional, Sequence

from ...config.constants import CACHE_CONTROL_EPHEMERAL, CACHED_USER_MESSAGE_COUNT
from ...core.capabilities.models import ModelInfo
from ...core.normalization.messages import transform_messages_for_provider
from ...core.normalization.params import normalize_params
from ...models.conversation_types import MessageLike
from ...models.protocol import ToolProtocol, coerce_tool_protocol


def _cached_text_block(text: str) -> Dict[str, Any]:
    return {"type": "text", "text": text, "cache_control": dict(CACHE_CONTROL_EPHEMERAL)}


def _mark_cache_breakpoint(message: Dict[str, Any]) -> None:
    content = message.get("content")
    if isinstance(content, str):
        message["content"] = [_cached_text_block(content)]
        return
    if isinstance(content, list) and content and isinstance(content[-1], dict):
        # Image-only messages are breakpoints too
        content[-1]["cache_control"] = dict(CACHE_CONTROL_EPHEMERAL)


def apply_prompt_cache_control(messages: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Mark the system message and the last two user messages as cache breakpoints.

    Cache markers attach to content blocks, so string content is wrapped in a
    one-element text block list. Earlier user messages are left untouched.
    Returns a new list; ``messages`` is not modified.
    """
    marked = copy.deepcopy(messages)

    if marked and marked[0].get("role") == "system":
        _mark_cache_breakpoint(marked[0])

    user_indices = [index for index, message in enumerate(marked) if message.get("role") == "user"]
    for index in user_indices[-CACHED_USER_MESSAGE_COUNT:]:
        _mark_cache_breakpoint(marked[index])

    return marked


def should_use_prompt_cache(use_prompt_cache: bool, model_info: Optional[ModelInfo]) -> bool:
    return bool(use_prompt_cache and model_info is not None and model_info.supports_prompt_cache)


def build_chat_payload(
    model_id: str,
    model_info: ModelInfo,
    system_prompt: str,
    messages: Sequence[MessageLike],
    use_prompt_cache: bool = False,
    temperature: Optional[float] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Build a streaming chat completions payload.

    Token limit field and temperature come from ``normalize_params``; usage is
    requested in-stream. Native tools are attached only when the request
    metadata says the conversation uses the native protocol.
    """
    chat_messages = [{"role": "system", "content": system_prompt}]
    chat_messages.extend(transform_messages_for_provider(messages))

    if should_use_prompt_cache(use_prompt_cache, model_info):
        chat_messages = apply_prompt_cache_control(chat_messages)

    payload = normalize_params(model_id, model_info.max_tokens, temperature)
    payload["messages"] = chat_messages
    payload["stream"] = True
    payload["stream_options"] = {"include_usage": True}

    metadata = metadata or {}
    tools = metadata.get("tools")
    if tools and coerce_tool_protocol(metadata.get("tool_protocol")) == ToolProtocol.NATIVE:
        payload["tools"] = list(tools)
        payload["tool_choice"] = metadata.get("tool_choice", "auto")
        payload["parallel_tool_calls"] = metadata.get("parallel_tool_calls", False)

    return payload


def build_completion_payload(
    model_id: str,
    model_info: ModelInfo,
    prompt: str,
    temperature: Optional[float] = None,
) -> Dict[str, Any]:
    """Build a non-streaming single-prompt payload with the same model rules."""
    payload = normalize_params(model_id, model_info.max_tokens, temperature)
    payload["messages"] = [{"role": "user", "content": prompt}]
    return payload
