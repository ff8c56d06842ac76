"""Normalization layer for standardizing provider interfaces.

This layer handles:
- Parameter naming across model families
- Conversation history conversion
- Usage data normalization
"""

from .messages import transform_messages_for_provider
from .params import map_max_tokens_field, normalize_params, supports_temperature
from .usage import calculate_usage_cost, normalize_usage

__all__ = [
    "transform_messages_for_provider",
    "map_max_tokens_field",
    "normalize_params",
    "supports_temperature",
    "calculate_usage_cost",
    "normalize_usage",
]
