from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import InvalidStatusCodeError
from .paginator import PaginatorAdapter
from .rules import STATUS_OK, SUCCESS_STATUS_RANGE


def _check_status(status: int) -> int:
    if status not in SUCCESS_STATUS_RANGE:
        raise InvalidStatusCodeError(status)
    return status


class Item(BaseModel):
    model_config = ConfigDict(frozen=True)

    data: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)
    resource_key: Optional[str] = None
    relations: Mapping[str, Union[Item, Collection]] = Field(default_factory=dict, validate_default=True)

    @field_validator("data", "relations")
    @classmethod
    def _read_only(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    def to_dict(self) -> Dict[str, Any]:
        """Flat fields with every relation embedded under its own name."""
        out = dict(self.data)
        for name, relation in self.relations.items():
            out[name] = relation.to_dict()
        return out


class Collection(BaseModel):
    model_config = ConfigDict(frozen=True)

    items: List[Item] = Field(default_factory=list)
    resource_key: Optional[str] = None

    def __len__(self) -> int:
        return len(self.items)

    def to_dict(self) -> List[Dict[str, Any]]:
        return [item.to_dict() for item in self.items]


Item.model_rebuild()


class SuccessResponse(BaseModel):
    """
    Normalized success response.

    Built once per normalization; the ``set_*`` methods return the response so
    they can be chained while it is being assembled.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    data: Union[Item, Collection]
    meta: Dict[str, Any] = Field(default_factory=dict)
    status: int = STATUS_OK
    paginator: Optional[PaginatorAdapter] = None

    @field_validator("status")
    @classmethod
    def _success_status(cls, status: int) -> int:
        return _check_status(status)

    def set_status(self, status: int) -> SuccessResponse:
        self.status = _check_status(status)
        return self

    def set_meta(self, meta: Dict[str, Any]) -> SuccessResponse:
        self.meta = dict(meta)
        return self

    def set_paginator(self, paginator: Optional[PaginatorAdapter]) -> SuccessResponse:
        self.paginator = paginator
        return self

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "status": self.status,
            "success": True,
            "data": self.data.to_dict(),
            "meta": dict(self.meta),
        }
        if self.paginator is not None:
            body["pagination"] = self.paginator.to_pagination().model_dump()
        return body
