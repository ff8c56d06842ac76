from typing import Optional

from ...config.constants import LITELLM_DEFAULT_BASE_URL, LITELLM_ENV_PREFIX
from ..openai_compatible.adapter import OpenAICompatibleProvider


class LiteLLMProvider(OpenAICompatibleProvider):
    """LiteLLM proxy provider.

    Options come from ``LITELLM_*`` environment variables unless passed in.
    Local proxies often run without auth, so a placeholder key is sent when
    none is configured.
    """

    provider_name = "litellm"
    env_prefix = LITELLM_ENV_PREFIX
    default_base_url: Optional[str] = LITELLM_DEFAULT_BASE_URL
    placeholder_api_key: Optional[str] = "dummy-key"
