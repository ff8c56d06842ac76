from __future__ import annotations

from typing import Dict, Mapping, Optional, Protocol, Tuple, Union

from .models import DEFAULT_MODEL_ID, DEFAULT_MODEL_INFO, ModelInfo


class ModelCatalog(Protocol):
    """Lookup capability supplied by the host application."""

    async def get_model_info(self, model_id: str) -> Optional[ModelInfo]: ...


class StaticModelCatalog:
    """In-memory catalog backed by a mapping of model id to metadata.

    Values may be ``ModelInfo`` instances or plain dicts using either the
    snake_case or camelCase field names.
    """

    def __init__(self, models: Optional[Mapping[str, Union[ModelInfo, Dict]]] = None):
        self._models: Dict[str, ModelInfo] = {}
        for model_id, info in (models or {}).items():
            self._models[model_id] = info if isinstance(info, ModelInfo) else ModelInfo.model_validate(info)

    async def get_model_info(self, model_id: str) -> Optional[ModelInfo]:
        return self._models.get(model_id)


async def resolve_model(
    catalog: Optional[ModelCatalog],
    model_id: Optional[str],
) -> Tuple[str, ModelInfo, bool]:
    """Return ``(model_id, info, found)`` for a configured model id.

    A missing id falls back to the default model. An id the catalog does not
    know keeps the requested id but uses the default metadata.
    """
    resolved_id = model_id or DEFAULT_MODEL_ID
    info = None
    if catalog is not None:
        info = await catalog.get_model_info(resolved_id)
    if info is None:
        return resolved_id, DEFAULT_MODEL_INFO, False
    return resolved_id, info, True
