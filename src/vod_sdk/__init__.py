from vod_sdk.client import VodClient
from vod_sdk.errors import ApiError
from vod_sdk.errors import InvariantViolation
from vod_sdk.errors import StorageError
from vod_sdk.errors import TransportError
from vod_sdk.errors import ValidationError
from vod_sdk.errors import VodError
from vod_sdk.models import FunctionSpec
from vod_sdk.models import PlaybackRequest


__all__ = [
    "ApiError",
    "FunctionSpec",
    "InvariantViolation",
    "PlaybackRequest",
    "StorageError",
    "TransportError",
    "ValidationError",
    "VodClient",
    "VodError",
]
