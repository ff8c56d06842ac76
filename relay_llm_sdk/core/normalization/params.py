"""
Parameter normalization module.

Chooses provider parameter names from the model family instead of scattering
model-name checks across request builders. Both the streaming and the
single-shot request builders go through these helpers.
"""

from typing import Any, Dict, Optional

from ...config.constants import DEFAULT_TEMPERATURE
from ...config.model_families import uses_max_completion_tokens


def map_max_tokens_field(model_id: str) -> str:
    """
    Determine the max tokens field name for a model.

    Returns:
        'max_completion_tokens' for the GPT-5 family, 'max_tokens' otherwise
    """
    if uses_max_completion_tokens(model_id):
        return "max_completion_tokens"
    return "max_tokens"


def supports_temperature(model_id: str) -> bool:
    """Models taking max_completion_tokens reject a temperature override."""
    return not uses_max_completion_tokens(model_id)


def normalize_params(
    model_id: str,
    max_tokens: Optional[int],
    temperature: Optional[float] = None,
) -> Dict[str, Any]:
    """
    Build the model-dependent part of a chat completions payload.

    Args:
        model_id: The model identifier
        max_tokens: Maximum output tokens from model metadata. When None no
            token limit field is sent at all.
        temperature: Configured temperature; defaults to ``DEFAULT_TEMPERATURE``

    Returns:
        Dict with ``model`` and, where applicable, exactly one token limit
        field and ``temperature``
    """
    normalized: Dict[str, Any] = {"model": model_id}

    if max_tokens is not None:
        normalized[map_max_tokens_field(model_id)] = max_tokens

    if supports_temperature(model_id):
        normalized["temperature"] = temperature if temperature is not None else DEFAULT_TEMPERATURE

    return normalized
