from .errors import InvalidStatusCodeError, ResourceKeyError, ResponderError
from .models import Collection, Item, SuccessResponse
from .normalize import ResourceNormalizer, normalize_resource
from .paginator import Pagination
from .resources import MISSING, JsonResource, MissingValue, ResourceCollection

__all__ = [
    "Collection",
    "InvalidStatusCodeError",
    "Item",
    "JsonResource",
    "MISSING",
    "MissingValue",
    "Pagination",
    "ResourceCollection",
    "ResourceKeyError",
    "ResourceNormalizer",
    "ResponderError",
    "SuccessResponse",
    "normalize_resource",
]
