"""Shared pytest fixtures for Relay LLM SDK tests."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from relay_llm_sdk.config.options import ProviderOptions
from relay_llm_sdk.core.capabilities import DEFAULT_MODEL_ID, DEFAULT_MODEL_INFO, StaticModelCatalog
from relay_llm_sdk.models.conversation_types import ConversationMessage, TurnRole as ConversationRole
from relay_llm_sdk.providers.litellm import LiteLLMProvider

GPT5_MODEL_IDS = [
    "gpt-5",
    "gpt5",
    "GPT-5",
    "gpt-5-turbo",
    "gpt5-preview",
    "gpt-5o",
    "gpt-5.1",
    "gpt-5-mini",
]

NON_GPT5_MODEL_IDS = ["gpt-4", "claude-3-opus", "llama-3", "gpt-4-turbo"]


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: tests spanning protocol policy and providers")
    config.addinivalue_line("markers", "slow: long-running tests")


@pytest.fixture
def model_catalog():
    """Catalog with the default model plus GPT-5 variants and a few others."""
    default_info = DEFAULT_MODEL_INFO.model_dump()
    models = {DEFAULT_MODEL_ID: DEFAULT_MODEL_INFO}
    for model_id in GPT5_MODEL_IDS + NON_GPT5_MODEL_IDS:
        models[model_id] = {**default_info, "max_tokens": 8192}
    models["no-limit-model"] = {**default_info, "max_tokens": None}
    models["gpt-5-no-limit"] = {**default_info, "max_tokens": None}
    models["no-cache-model"] = {**default_info, "supports_prompt_cache": False}
    return StaticModelCatalog(models)


@pytest.fixture
def mock_openai_client():
    """Mock AsyncOpenAI client; tests set ``chat.completions.create`` behavior."""
    client = MagicMock()
    client.chat.completions.create = AsyncMock()
    return client


@pytest.fixture
def make_provider(mock_openai_client, model_catalog):
    """Factory for LiteLLM providers wired to the mock client and catalog."""
    def _make(**overrides):
        options = {
            "api_key": "test-key",
            "base_url": "http://localhost:4000",
            "model_id": DEFAULT_MODEL_ID,
        }
        options.update(overrides)
        return LiteLLMProvider(
            options=ProviderOptions(**options),
            model_catalog=model_catalog,
            client=mock_openai_client,
        )
    return _make


@pytest.fixture
def sample_conversation_messages():
    """User/assistant/user history."""
    return [
        ConversationMessage(role=ConversationRole.USER, content="Hello"),
        ConversationMessage(role=ConversationRole.ASSISTANT, content="Hi there!"),
        ConversationMessage(role=ConversationRole.USER, content="How are you?"),
    ]


@pytest.fixture
def native_tool_history():
    """History whose last tool call used the native protocol."""
    return [
        {"role": "user", "content": "List the files"},
        {
            "role": "assistant",
            "content": [
                {"type": "text", "text": "Listing files."},
                {"type": "tool_use", "id": "toolu_01", "name": "list_files", "input": {"path": "."}},
            ],
        },
        {
            "role": "user",
            "content": [
                {"type": "tool_result", "tool_use_id": "toolu_01", "content": "a.py\nb.py"},
            ],
        },
    ]


@pytest.fixture
def xml_tool_history():
    """History whose tool calls were parsed from XML markup (no ids)."""
    return [
        {"role": "user", "content": "Read a.py"},
        {
            "role": "assistant",
            "content": [
                {"type": "text", "text": "<read_file><path>a.py</path></read_file>"},
                {"type": "tool_use", "name": "read_file", "input": {"path": "a.py"}},
            ],
        },
    ]
