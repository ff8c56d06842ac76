from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ToolProtocol(str, Enum):
    """How a model invokes tools."""
    NATIVE = "native"
    XML = "xml"


class ProviderSettings(BaseModel):
    """Subset of the user's provider configuration consulted for tool protocol resolution."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    api_provider: Optional[str] = Field(None, alias="apiProvider", description="Configured backend family")
    tool_protocol: Optional[ToolProtocol] = Field(None, alias="toolProtocol", description="Stored user preference")


def coerce_tool_protocol(value: Any) -> Optional[ToolProtocol]:
    """Convert a stored protocol value to ``ToolProtocol``.

    Falsy and unrecognized values map to None.
    """
    if not value:
        return None
    if isinstance(value, ToolProtocol):
        return value
    try:
        return ToolProtocol(str(value).lower())
    except ValueError:
        return None
