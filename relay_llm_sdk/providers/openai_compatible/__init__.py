from .adapter import OpenAICompatibleProvider
from .payloads import apply_prompt_cache_control, build_chat_payload, build_completion_payload

__all__ = [
    "OpenAICompatibleProvider",
    "apply_prompt_cache_control",
    "build_chat_payload",
    "build_completion_payload",
]
