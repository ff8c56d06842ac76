import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .constants import DEFAULT_TIMEOUT_SECONDS

# Load environment variables
load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


class ProviderOptions(BaseModel):
    """Per-handler options for an OpenAI-compatible gateway."""
    api_key: Optional[str] = Field(None, description="Gateway API key")
    base_url: Optional[str] = Field(None, description="Gateway base URL")
    model_id: Optional[str] = Field(None, description="Model identifier sent to the gateway")
    use_prompt_cache: bool = Field(False, description="Mark cache breakpoints when the model supports it")
    model_temperature: Optional[float] = Field(None, ge=0.0, le=2.0, description="Sampling temperature override")
    timeout: float = Field(DEFAULT_TIMEOUT_SECONDS, gt=0, description="Request timeout in seconds")

    @classmethod
    def from_env(cls, prefix: str, default_base_url: Optional[str] = None) -> "ProviderOptions":
        """Build options from ``<PREFIX>_*`` environment variables."""
        def env(name: str) -> Optional[str]:
            return os.getenv(f"{prefix}_{name}")

        try:
            timeout = float(env("TIMEOUT") or DEFAULT_TIMEOUT_SECONDS)
        except ValueError:
            timeout = DEFAULT_TIMEOUT_SECONDS

        temperature = None
        raw_temperature = env("TEMPERATURE")
        if raw_temperature:
            try:
                temperature = float(raw_temperature)
            except ValueError:
                temperature = None
            if temperature is not None and not 0.0 <= temperature <= 2.0:
                temperature = None

        return cls(
            api_key=env("API_KEY"),
            base_url=env("BASE_URL") or default_base_url,
            model_id=env("MODEL_ID"),
            use_prompt_cache=(env("USE_PROMPT_CACHE") or "").strip().lower() in _TRUTHY,
            model_temperature=temperature,
            timeout=timeout,
        )
