"""
Resource wrappers consumed by the normalizer.

A resource wrapper holds a domain object (``.resource``) and knows how to turn it
into a plain dict for a given request. Applications subclass ``JsonResource``
and override ``to_array``; nested wrappers returned from ``to_array`` are treated
as relations.

Domain objects may optionally provide:
- ``get_resource_key()`` - the key grouping this type of entity
- ``get_table()`` - fallback key, usually the table name
- ``was_recently_created`` - true right after an insert
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Protocol, runtime_checkable

from .rules import CREATED_FLAG


class MissingValue:
    """Marker for a field or relation that is intentionally absent."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = MissingValue()


@runtime_checkable
class LengthAwarePaginator(Protocol):
    def items(self) -> List[Any]: ...

    def total(self) -> int: ...

    def count(self) -> int: ...

    def per_page(self) -> int: ...

    def current_page(self) -> int: ...

    def last_page(self) -> int: ...

    def url(self, page: int) -> str: ...


def is_missing(value: Any) -> bool:
    if isinstance(value, MissingValue):
        return True
    return isinstance(value, JsonResource) and isinstance(value.resource, MissingValue)


def _resolve_value(value: Any, request: Any) -> Any:
    if isinstance(value, JsonResource):
        return value.resolve(request)
    if isinstance(value, Mapping):
        return {k: _resolve_value(v, request) for k, v in value.items() if not is_missing(v)}
    if isinstance(value, (list, tuple)):
        return [_resolve_value(v, request) for v in value if not is_missing(v)]
    return value


class JsonResource:
    def __init__(self, resource: Any):
        self.resource = resource
        self.additional: Dict[str, Any] = {}

    def to_array(self, request: Any = None) -> Dict[str, Any]:
        """
        Map the domain object to a dict.

        Defaults to a mapping's items, ``to_dict()`` when the object has one, or its
        public instance attributes minus the recently-created flag.
        """
        if self.resource is None or isinstance(self.resource, MissingValue):
            return {}
        if isinstance(self.resource, Mapping):
            return dict(self.resource)
        to_dict = getattr(self.resource, "to_dict", None)
        if callable(to_dict):
            return dict(to_dict())
        return {
            k: v for k, v in vars(self.resource).items() if not k.startswith("_") and k != CREATED_FLAG
        }

    def resolve(self, request: Any = None) -> Dict[str, Any]:
        """Fully resolved dict: missing values dropped, nested resources resolved at any depth."""
        return _resolve_value(self.to_array(request), request)

    def with_(self, request: Any = None) -> Dict[str, Any]:
        """Extra top-level metadata for the response. Override per resource."""
        return {}

    def with_additional(self, data: Mapping[str, Any]) -> "JsonResource":
        self.additional = dict(data)
        return self

    def when(self, condition: bool, value: Any, default: Any = MISSING) -> Any:
        if condition:
            return value() if callable(value) else value
        return default() if callable(default) else default


class ResourceCollection(JsonResource):
    """A named collection of resources, optionally backed by a paginator."""

    collects: Callable[[Any], JsonResource] = JsonResource

    def __init__(self, resource: Any):
        super().__init__(resource)
        if resource is None or isinstance(resource, MissingValue):
            items: Any = []
        elif isinstance(resource, LengthAwarePaginator):
            items = resource.items()
        else:
            items = resource
        self.collection: List[JsonResource] = [
            item if isinstance(item, JsonResource) else self.collects(item) for item in items
        ]

    def to_array(self, request: Any = None) -> List[Dict[str, Any]]:
        return [item.to_array(request) for item in self.collection]

    def resolve(self, request: Any = None) -> List[Dict[str, Any]]:
        return [item.resolve(request) for item in self.collection]

    def __len__(self) -> int:
        return len(self.collection)
