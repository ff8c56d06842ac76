"""Configuration module for Relay LLM SDK."""

from .model_families import (
    MAX_COMPLETION_TOKENS_FAMILIES,
    uses_max_completion_tokens,
)
from .options import ProviderOptions

# Import all constants
from .constants import *

__all__ = [
    "MAX_COMPLETION_TOKENS_FAMILIES",
    "uses_max_completion_tokens",
    "ProviderOptions",
]
