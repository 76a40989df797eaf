"""
Normalization of API resources into success responses.

Responsibilities:
- single resources become an Item, resource collections a Collection
- nested resources returned from ``to_array`` become relations, recursively
- 201 for a freshly created domain object, 200 otherwise
- ``with_`` and ``additional`` data merged into the response metadata
- collections backed by a length-aware paginator get a paginator adapter
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Union

from .errors import ResourceKeyError
from .merge import merge_recursive
from .models import Collection, Item, SuccessResponse
from .paginator import PaginatorAdapter
from .resources import JsonResource, LengthAwarePaginator, ResourceCollection, is_missing
from .rules import CREATED_FLAG, RESOURCE_KEY_METHOD, STATUS_CREATED, STATUS_OK, TABLE_METHOD

logger = logging.getLogger(__name__)


class ResourceNormalizer:
    def __init__(self, data: JsonResource, request: Any = None):
        self.data = data
        self.request = request

    def normalize(self) -> SuccessResponse:
        if isinstance(self.data, ResourceCollection):
            payload: Union[Item, Collection] = self.build_collection(self.data)
        else:
            payload = self.build_resource(self.data)

        response = (
            SuccessResponse(data=payload)
            .set_status(self._calculate_status(self.data))
            .set_meta(merge_recursive(self.data.with_(self.request), self.data.additional))
        )

        if isinstance(self.data.resource, LengthAwarePaginator):
            response.set_paginator(PaginatorAdapter(self.data.resource))

        logger.debug(
            "Normalized %s into %s (status=%s, paginated=%s)",
            type(self.data).__name__,
            type(payload).__name__,
            response.status,
            response.paginator is not None,
        )
        return response

    def build_resource(self, resource: JsonResource) -> Item:
        resource_key = self._resolve_resource_key(resource)
        relations = self._extract_relations(resource)
        fields = {k: v for k, v in resource.resolve(self.request).items() if k not in relations}
        return Item(data=fields, resource_key=resource_key, relations=relations)

    def build_collection(self, collection: ResourceCollection) -> Collection:
        resources = collection.collection
        resource_key = self._resolve_resource_key(resources[0]) if resources else None
        return Collection(items=[self.build_resource(r) for r in resources], resource_key=resource_key)

    def _resolve_resource_key(self, resource: JsonResource) -> str:
        """
        Resolve the resource key of a resource.

        Sources, first match wins:
        - ``get_resource_key()`` on the resource wrapper
        - ``get_resource_key()`` on the wrapped domain object
        - ``get_table()`` on the wrapped domain object
        """
        candidates = (
            ("resource", getattr(resource, RESOURCE_KEY_METHOD, None)),
            ("model", getattr(resource.resource, RESOURCE_KEY_METHOD, None)),
            ("table", getattr(resource.resource, TABLE_METHOD, None)),
        )
        for source, method in candidates:
            if callable(method):
                key = method()
                logger.debug("Resolved resource key %r from %s", key, source)
                return key

        logger.error("No resource key source on %s wrapping %r", type(resource).__name__, resource.resource)
        raise ResourceKeyError(
            f"Cannot resolve a resource key for {type(resource).__name__}: "
            f"neither it nor its {type(resource.resource).__name__} defines "
            f"{RESOURCE_KEY_METHOD}() or {TABLE_METHOD}()"
        )

    def _extract_relations(self, resource: JsonResource) -> Dict[str, Union[Item, Collection]]:
        relations: Dict[str, Union[Item, Collection]] = {}
        for key, value in resource.to_array(self.request).items():
            if not isinstance(value, JsonResource) or is_missing(value):
                continue
            if isinstance(value, ResourceCollection):
                relations[key] = self.build_collection(value)
            else:
                relations[key] = self.build_resource(value)
        return relations

    def _calculate_status(self, resource: JsonResource) -> int:
        return STATUS_CREATED if getattr(resource.resource, CREATED_FLAG, False) is True else STATUS_OK


def normalize_resource(data: JsonResource, request: Any = None) -> SuccessResponse:
    return ResourceNormalizer(data, request).normalize()
