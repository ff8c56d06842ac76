"""
Usage normalization module.

Maps provider usage blocks (OpenAI-style field names, plus the Anthropic-style
cache fields LiteLLM passes through) onto ``UsageEvent``.
"""

from typing import Any, Dict, Optional

from ..capabilities.models import ModelInfo
from ...models.events import UsageEvent


def usage_to_dict(usage: Any) -> Dict[str, Any]:
    """Convert an SDK usage object or mapping to a plain dict."""
    if usage is None:
        return {}
    if isinstance(usage, dict):
        return usage
    if hasattr(usage, "model_dump"):
        dumped = usage.model_dump()
        if isinstance(dumped, dict):
            return dumped
    try:
        return dict(vars(usage))
    except TypeError:
        return {}


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return int(value)


def extract_cache_info(usage_data: Dict[str, Any]) -> Dict[str, int]:
    """
    Extract cache token counts that are actually present in ``usage_data``.

    Returns:
        Dict with ``cache_write_tokens`` and/or ``cache_read_tokens``
    """
    cache_info: Dict[str, int] = {}

    write_tokens = _as_int(usage_data.get("cache_creation_input_tokens"))
    if write_tokens is not None:
        cache_info["cache_write_tokens"] = write_tokens

    read_tokens = _as_int(usage_data.get("cache_read_input_tokens"))
    if read_tokens is None:
        # OpenAI reports cache hits in prompt_tokens_details
        details = usage_data.get("prompt_tokens_details")
        if isinstance(details, dict):
            read_tokens = _as_int(details.get("cached_tokens"))
    if read_tokens is not None:
        cache_info["cache_read_tokens"] = read_tokens

    return cache_info


def calculate_usage_cost(event: UsageEvent, model_info: Optional[ModelInfo]) -> Optional[float]:
    """
    Calculate request cost from token counts and per-1K pricing.

    Returns:
        Total cost in USD, or None when input/output pricing is unknown
    """
    if model_info is None:
        return None
    if model_info.input_cost_per_1k_tokens is None or model_info.output_cost_per_1k_tokens is None:
        return None

    input_cost = (event.input_tokens / 1000) * model_info.input_cost_per_1k_tokens
    output_cost = (event.output_tokens / 1000) * model_info.output_cost_per_1k_tokens

    cache_cost = 0.0
    if event.cache_write_tokens and model_info.cache_write_cost_per_1k_tokens is not None:
        cache_cost += (event.cache_write_tokens / 1000) * model_info.cache_write_cost_per_1k_tokens
    if event.cache_read_tokens and model_info.cache_read_cost_per_1k_tokens is not None:
        cache_cost += (event.cache_read_tokens / 1000) * model_info.cache_read_cost_per_1k_tokens

    return input_cost + output_cost + cache_cost


def normalize_usage(usage: Any, model_info: Optional[ModelInfo] = None) -> UsageEvent:
    """
    Normalize a provider usage block into a ``UsageEvent``.

    Args:
        usage: Raw usage (dict, pydantic model or attribute object)
        model_info: Model metadata used for cost calculation (optional)

    Returns:
        UsageEvent with cache fields only when the provider reported them
    """
    usage_data = usage_to_dict(usage)

    event = UsageEvent(
        input_tokens=_as_int(usage_data.get("prompt_tokens")) or 0,
        output_tokens=_as_int(usage_data.get("completion_tokens")) or 0,
        **extract_cache_info(usage_data),
    )
    event.total_cost = calculate_usage_cost(event, model_info)
    return event
