from typing import Any, AsyncGenerator, Dict, Optional, Sequence, Tuple

from openai import AsyncOpenAI

from ..base import ProviderAdapter, ProviderError
from ..errors import ErrorMapper
from ...config.constants import OPENAI_COMPATIBLE_ENV_PREFIX
from ...config.options import ProviderOptions
from ...core.capabilities import ModelCatalog, ModelInfo, resolve_model
from ...models.conversation_types import MessageLike, get_field
from ...models.events import StreamEvent, UsageEvent
from ...observability.logging import ProviderLogger
from ...streaming import StreamAdapter
from .payloads import build_chat_payload, build_completion_payload
from .streaming import stream_chat_completions


class OpenAICompatibleProvider(ProviderAdapter):
    """Provider for any gateway speaking the OpenAI chat completions protocol."""

    provider_name = "openai-compatible"
    env_prefix = OPENAI_COMPATIBLE_ENV_PREFIX
    default_base_url: Optional[str] = None
    # Sent when the gateway does not need a key but the client requires one
    placeholder_api_key: Optional[str] = None

    def __init__(
        self,
        options: Optional[ProviderOptions] = None,
        model_catalog: Optional[ModelCatalog] = None,
        client: Optional[AsyncOpenAI] = None,
    ):
        self.options = options or ProviderOptions.from_env(self.env_prefix, self.default_base_url)
        self.model_catalog = model_catalog
        self._client = client
        self._logger = ProviderLogger(self.provider_name)

    @property
    def client(self) -> AsyncOpenAI:
        """Lazy initialization of the OpenAI client."""
        if self._client is None:
            api_key = self.options.api_key or self.placeholder_api_key
            if not api_key:
                raise ProviderError(
                    f"{self.provider_name} API key not found in options or environment variables",
                    provider=self.provider_name,
                )
            self._client = AsyncOpenAI(
                api_key=api_key,
                base_url=self.options.base_url,
                timeout=self.options.timeout,
            )
        return self._client

    def is_available(self) -> bool:
        return bool(self.options.api_key or (self.placeholder_api_key and self.options.base_url))

    def get_provider_name(self) -> str:
        return self.provider_name

    async def fetch_model(self) -> Tuple[str, ModelInfo]:
        """Resolve the configured model id against the catalog."""
        model_id, info, found = await resolve_model(self.model_catalog, self.options.model_id)
        if not found:
            self._logger.debug("Model not in catalog, using default model info", model=model_id)
        return model_id, info

    async def create_message(
        self,
        system_prompt: str,
        messages: Sequence[MessageLike],
        metadata: Optional[Dict[str, Any]] = None,
    ) -> AsyncGenerator[StreamEvent, None]:
        """Stream a chat completion as normalized events."""
        model_id, info = await self.fetch_model()

        with self._logger.track_request("create_message", model_id) as request_info:
            request_id = request_info['request_id']
            adapter = StreamAdapter(self.provider_name, model_id, info, self._logger, request_id)
            payload = build_chat_payload(
                model_id,
                info,
                system_prompt,
                messages,
                use_prompt_cache=self.options.use_prompt_cache,
                temperature=self.options.model_temperature,
                metadata=metadata,
            )

            try:
                stream = await self.client.chat.completions.create(**payload, timeout=self.options.timeout)
                events = stream_chat_completions(stream, adapter)
                try:
                    async for event in events:
                        if isinstance(event, UsageEvent):
                            self._logger.log_usage(event, model_id, request_id)
                        yield event
                finally:
                    # Closing early must stop pulling from the upstream stream
                    await events.aclose()
            except Exception as e:
                request_info['error_info'] = ErrorMapper.classify(e)
                raise
            finally:
                self._logger.log_streaming_metrics(adapter.get_metrics(), model_id, request_id)

    async def complete_prompt(self, prompt: str) -> str:
        """Non-streaming completion of a single user prompt."""
        model_id, info = await self.fetch_model()

        with self._logger.track_request("complete_prompt", model_id) as request_info:
            payload = build_completion_payload(model_id, info, prompt, self.options.model_temperature)

            try:
                response = await self.client.chat.completions.create(**payload, timeout=self.options.timeout)
            except Exception as e:
                request_info['error_info'] = ErrorMapper.classify(e)
                raise

            choices = get_field(response, "choices")
            if not isinstance(choices, (list, tuple)) or not choices:
                raise ProviderError(
                    f"{self.provider_name} completion response contained no choices",
                    provider=self.provider_name,
                )

            message = get_field(choices[0], "message")
            content = get_field(message, "content") if message is not None else None
            return content if isinstance(content, str) else ""
