"""
Base class for wire records.

Records are frozen dataclasses with snake_case attributes; on the wire the
exchange uses camelCase keys. Conversion in both directions is driven by the
dataclass field types.
"""

from dataclasses import MISSING, fields
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Mapping, Union, get_args, get_origin, get_type_hints

from ..errors import DeserializationError


def to_camel(name: str) -> str:
    """Convert a snake_case attribute name to its camelCase wire key."""
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def wire_key(field_obj) -> str:
    """Wire key for a dataclass field (``key`` metadata overrides camelCase)."""
    return field_obj.metadata.get("key", to_camel(field_obj.name))


def load_value(tp: Any, value: Any) -> Any:
    """Convert a decoded JSON value into the Python type ``tp``."""
    if tp is Any:
        return value
    if tp is type(None):
        if value is not None:
            raise TypeError(f"expected null, got {type(value).__name__}")
        return None
    if tp is Decimal:
        if isinstance(value, (bool, float)) or not isinstance(value, (str, int)):
            raise TypeError(f"expected decimal string, got {type(value).__name__}")
        return Decimal(str(value))
    if tp is int:
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise TypeError(f"expected integer, got {type(value).__name__}")
        return int(value)
    if tp is str:
        if not isinstance(value, str):
            raise TypeError(f"expected string, got {type(value).__name__}")
        return value
    if tp is bool:
        if not isinstance(value, bool):
            raise TypeError(f"expected boolean, got {type(value).__name__}")
        return value

    origin = get_origin(tp)
    args = get_args(tp)
    if origin is Union:
        if value is None and type(None) in args:
            return None
        candidates = [arg for arg in args if arg is not type(None)]
        return load_value(candidates[0], value)
    if origin in (list, List):
        if not isinstance(value, list):
            raise TypeError(f"expected list, got {type(value).__name__}")
        (item_type,) = args or (Any,)
        return [load_value(item_type, item) for item in value]
    if origin in (dict, Dict):
        if not isinstance(value, dict):
            raise TypeError(f"expected object, got {type(value).__name__}")
        return dict(value)

    target = origin or tp
    if isinstance(target, type) and issubclass(target, WireModel):
        return target.from_dict(value, *args)

    raise TypeError(f"unsupported field type {tp!r}")


def dump_value(value: Any) -> Any:
    """Convert a Python value back into its JSON-compatible form."""
    if isinstance(value, WireModel):
        return value.to_dict()
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, (list, tuple)):
        return [dump_value(item) for item in value]
    if isinstance(value, dict):
        return {key: dump_value(item) for key, item in value.items()}
    return value


class WireModel:
    """Mixin for frozen dataclasses mirrored from the exchange's JSON."""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]):
        """
        Build an instance from a decoded JSON object.

        Raises:
            DeserializationError: if a required key is missing or a value
                has the wrong type
        """
        if not isinstance(data, Mapping):
            raise DeserializationError(
                f"{cls.__name__}: expected object, got {type(data).__name__}", body=data
            )

        hints = get_type_hints(cls)
        kwargs = {}
        for field_obj in fields(cls):
            key = wire_key(field_obj)
            if key not in data:
                if field_obj.default is MISSING and field_obj.default_factory is MISSING:
                    raise DeserializationError(
                        f"{cls.__name__}: missing field '{key}'", body=data
                    )
                continue
            try:
                kwargs[field_obj.name] = load_value(hints[field_obj.name], data[key])
            except DeserializationError:
                raise
            except (TypeError, ValueError, InvalidOperation) as e:
                raise DeserializationError(
                    f"{cls.__name__}.{field_obj.name}: {e}", body=data
                ) from e
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the exchange's JSON shape, omitting unset optionals."""
        result = {}
        for field_obj in fields(self):
            value = getattr(self, field_obj.name)
            if value is None and field_obj.default is None:
                continue
            result[wire_key(field_obj)] = dump_value(value)
        return result
