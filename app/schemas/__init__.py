"""全局 Schema"""

from .base import BaseSchema, RecordResponse, UTCDateTime
from .response import ApiResponse, ErrorResponse

__all__ = [
    "ApiResponse",
    "BaseSchema",
    "ErrorResponse",
    "RecordResponse",
    "UTCDateTime",
]
