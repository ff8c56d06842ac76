"""
Provider constants

Central location for provider identifiers, wire-level markers and
environment variable names used across the SDK.
"""

# Providers that still let users pick the XML tool protocol.
# Every other provider is native-only.
XML_PROTOCOL_SUPPORTED_PROVIDERS = (
    "openai-compatible",
    "litellm",
)

# Marker attached to content blocks that act as prompt-cache breakpoints
CACHE_CONTROL_EPHEMERAL = {"type": "ephemeral"}

# Number of trailing user messages marked as cache breakpoints
CACHED_USER_MESSAGE_COUNT = 2

# Temperature sent when the user has not configured one
DEFAULT_TEMPERATURE = 0.0

# Request timeout (seconds) when the environment does not override it
DEFAULT_TIMEOUT_SECONDS = 60.0

# LiteLLM proxy defaults
LITELLM_ENV_PREFIX = "LITELLM"
LITELLM_DEFAULT_BASE_URL = "http://localhost:4000"

# Generic OpenAI-compatible endpoint
OPENAI_COMPATIBLE_ENV_PREFIX = "OPENAI_COMPATIBLE"
