"""
Provider Adapters Layer

This layer contains the OpenAI-compatible gateway adapters. Each adapter
translates between the SDK's normalized interface and the gateway's chat
completions wire format.
"""

from .base import ProviderAdapter, ProviderError
from .openai_compatible.adapter import OpenAICompatibleProvider
from .litellm.adapter import LiteLLMProvider

__all__ = [
    "ProviderAdapter",
    "ProviderError",
    "OpenAICompatibleProvider",
    "LiteLLMProvider",
]
