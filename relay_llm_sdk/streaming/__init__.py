"""Streaming normalization.

StreamAdapter turns provider chunks into normalized events; the delta field
table in ``types`` decides which fields are read and in what order.
"""

from .adapter import StreamAdapter
from .types import DELTA_FIELD_KINDS, StreamState

__all__ = [
    "StreamAdapter",
    "StreamState",
    "DELTA_FIELD_KINDS",
]
