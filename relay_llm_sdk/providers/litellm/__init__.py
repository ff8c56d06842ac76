from .adapter import LiteLLMProvider

__all__ = ["LiteLLMProvider"]
