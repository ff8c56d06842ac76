"""
Base Provider Adapter Interface

This module defines the abstract base class for provider adapters that turn a
system prompt and conversation history into a normalized event stream.
"""

from abc import ABC, abstractmethod
from typing import Any, AsyncGenerator, Dict, Optional, Sequence

from ..models.conversation_types import MessageLike
from ..models.events import StreamEvent


class ProviderAdapter(ABC):
    """
    Abstract base class for LLM provider adapters.

    The adapter is responsible for:
    - Building the provider request (token limit field, cache breakpoints)
    - Making the API call through the provider's transport client
    - Normalizing streamed chunks into ``StreamEvent`` values

    Provider adapters should NOT contain:
    - Tool protocol policy (see ``core.protocol``)
    - Retry logic (callers own retry policy)
    - Ad hoc model name checks (use ``config.model_families``)
    """

    @abstractmethod
    def create_message(
        self,
        system_prompt: str,
        messages: Sequence[MessageLike],
        metadata: Optional[Dict[str, Any]] = None,
    ) -> AsyncGenerator[StreamEvent, None]:
        """
        Stream a response as normalized events.

        Args:
            system_prompt: System instruction
            messages: Conversation history, oldest first
            metadata: Optional request metadata (``tools``, ``tool_protocol``)

        Yields:
            StreamEvent: text, reasoning, tool call and usage events in
            arrival order

        Raises:
            Transport errors unchanged
        """
        pass

    @abstractmethod
    async def complete_prompt(self, prompt: str) -> str:
        """
        Single-shot, non-streaming completion.

        Returns:
            str: The finished text content

        Raises:
            ProviderError: When the response has no choices
        """
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if the provider is configured.

        Returns:
            bool: True if an API key is present
        """
        pass

    @abstractmethod
    def get_provider_name(self) -> str:
        """Settings-level provider name, e.g. ``litellm``."""
        pass


class ProviderError(Exception):
    """
    Base exception for provider-related errors raised by this package.

    Raised for missing configuration and malformed top-level responses.
    Transport failures from the client library are not wrapped.

    Attributes:
        provider: Provider name
    """

    def __init__(self, message: str, provider: str):
        super().__init__(message)
        self.provider = provider
