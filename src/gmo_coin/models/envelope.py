"""
Response envelope models.

Every endpoint answers with ``{status, data, responsetime}``. Listings put
their records under ``data.list`` and paginated listings add
``data.pagination``.
"""

from dataclasses import dataclass, field
from decimal import InvalidOperation
from typing import Any, Dict, Generic, List, Mapping, Optional, TypeVar

from ..errors import DeserializationError
from .base import WireModel, dump_value, load_value

T = TypeVar("T")


@dataclass(frozen=True)
class Pagination(WireModel):
    """Position of one page within a paginated listing."""
    current_page: int
    count: int


@dataclass(frozen=True)
class Page(WireModel, Generic[T]):
    """One page of records. ``items`` is sent as ``list`` on the wire."""
    pagination: Optional[Pagination] = None
    items: List[T] = field(default_factory=list, metadata={"key": "list"})

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], item_type: Any = Any) -> "Page":
        if not isinstance(data, Mapping):
            raise DeserializationError(
                f"Page: expected object, got {type(data).__name__}", body=data
            )
        # An empty result set arrives as "data": {}
        pagination = data.get("pagination")
        return cls(
            pagination=Pagination.from_dict(pagination) if pagination is not None else None,
            items=_load_items(cls.__name__, item_type, data),
        )


@dataclass(frozen=True)
class Listing(WireModel, Generic[T]):
    """Unpaginated list of records."""
    items: List[T] = field(default_factory=list, metadata={"key": "list"})

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], item_type: Any = Any) -> "Listing":
        if not isinstance(data, Mapping):
            raise DeserializationError(
                f"Listing: expected object, got {type(data).__name__}", body=data
            )
        return cls(items=_load_items(cls.__name__, item_type, data))


def _load_items(owner: str, item_type: Any, data: Mapping[str, Any]) -> list:
    try:
        return load_value(List[item_type], data.get("list", []))
    except DeserializationError:
        raise
    except (TypeError, ValueError, InvalidOperation) as e:
        raise DeserializationError(f"{owner}.list: {e}", body=data) from e


@dataclass(frozen=True)
class Response(Generic[T]):
    """
    Single-object envelope.

    Attributes:
        status: 0 on success, otherwise an exchange error code
        data: decoded payload (None for endpoints that return no data)
        responsetime: server timestamp, e.g. ``2021-01-01T00:00:00.000Z``
        messages: error descriptions sent with a nonzero status
    """
    status: int
    data: T
    responsetime: str
    messages: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == 0

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any], data_type: Any = Any) -> "Response":
        """
        Decode an envelope, converting ``data`` to ``data_type``.

        Pass ``None`` as ``data_type`` for endpoints that return no data.
        """
        if not isinstance(payload, Mapping):
            raise DeserializationError(
                f"Response: expected object, got {type(payload).__name__}", body=payload
            )
        for key in ("status", "responsetime"):
            if key not in payload:
                raise DeserializationError(f"Response: missing field '{key}'", body=payload)

        try:
            status = load_value(int, payload["status"])
            responsetime = load_value(str, payload["responsetime"])
            messages = load_value(List[Dict[str, Any]], payload.get("messages") or [])
            if data_type is None:
                data = None
            elif "data" not in payload:
                raise DeserializationError("Response: missing field 'data'", body=payload)
            else:
                data = load_value(data_type, payload["data"])
        except DeserializationError:
            raise
        except (TypeError, ValueError, InvalidOperation) as e:
            raise DeserializationError(f"Response: {e}", body=payload) from e

        return cls(status=status, data=data, responsetime=responsetime, messages=messages)

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"status": self.status}
        if self.data is not None:
            result["data"] = dump_value(self.data)
        result["responsetime"] = self.responsetime
        if self.messages:
            result["messages"] = dump_value(self.messages)
        return result


class ResponsePage(Response[Page[T]]):
    """Envelope for listings that accept ``page``/``count``."""

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any], item_type: Any = Any) -> "ResponsePage":
        return super().from_dict(payload, Page[item_type])


class ResponseList(Response[Listing[T]]):
    """Envelope for listings without pagination."""

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any], item_type: Any = Any) -> "ResponseList":
        return super().from_dict(payload, Listing[item_type])
