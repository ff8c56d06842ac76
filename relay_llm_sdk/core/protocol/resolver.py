"""
Tool protocol resolution.

XML tool protocol is deprecated for most providers. For legacy compatibility
the providers in ``XML_PROTOCOL_SUPPORTED_PROVIDERS`` (OpenAI Compatible and
LiteLLM) still let users choose between XML and native via settings.

Precedence:
1. Locked protocol (task-level lock for resumed tasks)
2. User preference (allow-listed providers only)
3. Native
"""

from typing import Any, Mapping, Optional, Union

from ...config.constants import XML_PROTOCOL_SUPPORTED_PROVIDERS
from ...models.conversation_types import get_field
from ...models.protocol import ProviderSettings, ToolProtocol, coerce_tool_protocol


def _setting(settings: Any, camel: str, snake: str) -> Any:
    if isinstance(settings, Mapping):
        return settings.get(camel, settings.get(snake))
    value = get_field(settings, camel)
    return value if value is not None else get_field(settings, snake)


def _read_settings(settings: Any):
    if settings is None:
        return None, None
    if isinstance(settings, ProviderSettings):
        return settings.api_provider, settings.tool_protocol
    provider = _setting(settings, "apiProvider", "api_provider")
    preference = _setting(settings, "toolProtocol", "tool_protocol")
    return provider, coerce_tool_protocol(preference)


def resolve_tool_protocol(
    settings: Union[ProviderSettings, Mapping[str, Any], None],
    model_info: Any = None,
    locked_protocol: Optional[Union[ToolProtocol, str]] = None,
) -> ToolProtocol:
    """
    Resolve the effective tool protocol for a turn.

    Args:
        settings: Provider settings: ``ProviderSettings``, a mapping or an
            attribute object with ``apiProvider``/``toolProtocol`` or their
            snake_case forms
        model_info: Unused, accepted for interface stability
        locked_protocol: Task-level lock; a truthy value wins outright

    Returns:
        ToolProtocol: Never raises; falls back to ``ToolProtocol.NATIVE``
    """
    # 1. A resumed task keeps its original protocol even if settings changed
    locked = coerce_tool_protocol(locked_protocol)
    if locked is not None:
        return locked

    # 2. Allow-listed providers respect an explicit user preference
    provider, preference = _read_settings(settings)
    if provider and provider in XML_PROTOCOL_SUPPORTED_PROVIDERS and preference is not None:
        return preference

    # 3. Native for everything else
    return ToolProtocol.NATIVE
