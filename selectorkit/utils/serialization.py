"""JSON text helpers that reattach parsed data to a prototype."""

from __future__ import annotations

import json
from typing import Any

import structlog
from pydantic import BaseModel, ValidationError

from selectorkit.exceptions import SerializationError

logger = structlog.get_logger(__name__)


class PrototypeView:
    """Parsed JSON data that falls back to ``proto`` for unknown attributes.

    The prototype lives in a slot, so ``vars(view)`` is exactly the parsed data.
    """

    __slots__ = ("__dict__", "__proto")

    def __init__(self, proto: Any, data: dict[str, Any]) -> None:
        object.__setattr__(self, "_PrototypeView__proto", proto)
        self.__dict__.update(data)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup on the instance fails
        return getattr(object.__getattribute__(self, "_PrototypeView__proto"), name)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PrototypeView):
            return vars(self) == vars(other) and self.__proto is other.__proto
        return NotImplemented

    def __repr__(self) -> str:
        return f"PrototypeView({vars(self)!r}, proto={self.__proto!r})"


def _encode_model(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json_text(value: Any) -> str:
    """Encode ``value`` as compact JSON, e.g. ``{"width":10,"height":20}``.

    Pydantic models are dumped at any depth. ``NaN`` and infinities are
    rejected since they have no JSON form.
    """
    try:
        return json.dumps(
            value,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
            default=_encode_model,
        )
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Value is not JSON serializable: {e}") from e


def from_json_text(proto: Any, text: str) -> Any:
    """Parse ``text`` into an object whose missing lookups delegate to ``proto``.

    ``proto`` may be a pydantic model class (validated instance is returned),
    any other class (a bare instance is created without calling ``__init__``),
    or an arbitrary object (a :class:`PrototypeView` wraps the data).
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.warning("json_decode_failed", error=str(e), position=e.pos)
        raise SerializationError(f"Invalid JSON text: {e}") from e

    if not isinstance(data, dict):
        raise SerializationError(
            f"Expected a JSON object, got {type(data).__name__}"
        )

    if isinstance(proto, type) and issubclass(proto, BaseModel):
        try:
            return proto.model_validate(data)
        except ValidationError as e:
            logger.warning("json_validation_failed", model=proto.__name__, errors=e.error_count())
            raise SerializationError(f"Invalid data for {proto.__name__}: {e}") from e
        except TypeError as e:
            logger.warning("json_validation_failed", model=proto.__name__, error=str(e))
            raise SerializationError(f"Invalid data for {proto.__name__}: {e}") from e

    if isinstance(proto, type):
        obj = proto.__new__(proto)
        for key, value in data.items():
            setattr(obj, key, value)
        return obj

    return PrototypeView(proto, data)
