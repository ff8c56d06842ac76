"""Model metadata and catalog lookup.

This layer handles:
- Model metadata records consumed by provider adapters
- The injected catalog interface and a static in-memory catalog
- Default metadata for models the catalog does not know
"""

from .loader import ModelCatalog, StaticModelCatalog, resolve_model
from .models import DEFAULT_MODEL_ID, DEFAULT_MODEL_INFO, ModelInfo

__all__ = [
    "ModelCatalog",
    "StaticModelCatalog",
    "resolve_model",
    "ModelInfo",
    "DEFAULT_MODEL_ID",
    "DEFAULT_MODEL_INFO",
]
