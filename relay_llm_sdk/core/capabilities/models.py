"""
Model metadata used by provider adapters.

The catalog that produces these records lives outside this package; adapters
only read the handful of fields below to decide token limits, prompt caching
and cost.
"""

from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class ModelInfo(BaseModel):
    """Capabilities and limits reported by the model catalog for one model."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    # Model limits
    max_tokens: Optional[int] = Field(None, alias="maxTokens", description="Maximum output tokens, if known")
    context_window: Optional[int] = Field(None, alias="contextWindow", description="Context window in tokens")

    # Features
    supports_images: bool = Field(False, alias="supportsImages", description="Accepts image inputs")
    supports_prompt_cache: bool = Field(False, alias="supportsPromptCache", description="Honors cache_control breakpoints")

    # Cost tracking
    input_cost_per_1k_tokens: Optional[float] = Field(None, description="Cost per 1K input tokens")
    output_cost_per_1k_tokens: Optional[float] = Field(None, description="Cost per 1K output tokens")
    cache_write_cost_per_1k_tokens: Optional[float] = Field(None, description="Cost per 1K cache-write tokens")
    cache_read_cost_per_1k_tokens: Optional[float] = Field(None, description="Cost per 1K cache-read tokens")


DEFAULT_MODEL_ID = "claude-3-7-sonnet-20250219"

# Used when the catalog has no entry for the requested model
DEFAULT_MODEL_INFO = ModelInfo(
    max_tokens=8192,
    context_window=200000,
    supports_images=True,
    supports_prompt_cache=True,
    input_cost_per_1k_tokens=0.003,
    output_cost_per_1k_tokens=0.015,
    cache_write_cost_per_1k_tokens=0.00375,
    cache_read_cost_per_1k_tokens=0.0003,
)
