from pydantic import BaseModel, Field, ConfigDict
from typing import Annotated, Any, Dict, List, Literal, Optional, Union
from enum import Enum


class TurnRole(str, Enum):
    """Conversation turn roles."""
    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class TextBlock(BaseModel):
    """Plain text content block."""
    type: Literal["text"] = "text"
    text: str


class ImageBlock(BaseModel):
    """Image content block (base64 ``source`` as stored in history)."""
    type: Literal["image"] = "image"
    source: Dict[str, Any]


class ToolUseBlock(BaseModel):
    """Tool invocation emitted by the assistant.

    Native tool calls always carry ``id``; XML-style calls never do.
    """
    type: Literal["tool_use"] = "tool_use"
    id: Optional[str] = None
    name: str
    input: Dict[str, Any] = Field(default_factory=dict)


class ToolResultBlock(BaseModel):
    """Result of a tool invocation, sent back on the user side."""
    type: Literal["tool_result"] = "tool_result"
    tool_use_id: Optional[str] = None
    content: Union[str, List[Dict[str, Any]]] = ""
    is_error: Optional[bool] = None


ContentBlock = Annotated[
    Union[TextBlock, ImageBlock, ToolUseBlock, ToolResultBlock],
    Field(discriminator="type"),
]


class ConversationMessage(BaseModel):
    """Message in the conversation history handed to providers."""
    model_config = ConfigDict(use_enum_values=True)

    role: Union[TurnRole, str]
    content: Union[str, List[ContentBlock]]
    ts: Optional[float] = None


MessageLike = Union[ConversationMessage, Dict[str, Any]]


def get_field(obj: Any, name: str, default: Any = None) -> Any:
    """Read ``name`` from a dict or an attribute-style object."""
    if isinstance(obj, dict):
        return obj.get(name, default)
    return getattr(obj, name, default)
