"""
Domain: explicit wire-field mapping for contract objects.

A contract declares a static table of ContractField entries, one per
attribute. Each entry names:
- the Python attribute and its wire name,
- how a present, non-null wire value is decoded and how a set value is encoded,
- an optional `empty` factory. Fields with an `empty` factory collapse an
  absent or null wire value to that empty value and are always emitted.
  Fields without one stay unset (None) and are omitted when unset.

The table is applied by plain procedural code below; nothing is discovered
at runtime.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Tuple

from .errors import ContractShapeError
from .time import require_timezone_aware

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ContractField:
    """Mapping of one contract attribute to its wire representation."""

    attribute: str
    wire_name: str
    decode: Callable[[str, Any], Any]
    encode: Callable[[str, Any], Any]
    empty: Optional[Callable[[], Any]] = None

    @property
    def always_emitted(self) -> bool:
        return self.empty is not None


# ----------------------------------------------------------------------------
# Shape coercion (shared by construction and wire decoding)
# ----------------------------------------------------------------------------

def optional_int(name: str, value: Any) -> Optional[int]:
    # bool is an int subclass but not a JSON integer
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ContractShapeError(name, value, "an integer")
    return value


def optional_str(name: str, value: Any) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ContractShapeError(name, value, "a string")
    return value


def optional_timestamp(name: str, value: Any) -> Optional[datetime]:
    if value is None:
        return None
    if not isinstance(value, datetime):
        raise ContractShapeError(name, value, "a datetime")
    require_timezone_aware(name, value)
    return value


def str_tuple(name: str, value: Any) -> Tuple[str, ...]:
    """
    Coerce a sequence of strings into an immutable tuple.

    None collapses to an empty tuple. A bare string is rejected even though it
    is iterable.
    """

    if value is None:
        return ()
    if not isinstance(value, (list, tuple)):
        raise ContractShapeError(name, value, "an array of strings")
    for item in value:
        if not isinstance(item, str):
            raise ContractShapeError(name, value, "an array of strings")
    return tuple(value)


def identity(name: str, value: Any) -> Any:
    return value


# ----------------------------------------------------------------------------
# Table application
# ----------------------------------------------------------------------------

def decode_payload(payload: Mapping[str, Any], fields: Sequence[ContractField]) -> Dict[str, Any]:
    """
    Decode a JSON object into constructor keyword arguments.

    Unknown wire keys are ignored.
    """

    values: Dict[str, Any] = {}
    for field in fields:
        raw = payload.get(field.wire_name)
        if raw is None:
            values[field.attribute] = field.empty() if field.empty is not None else None
        else:
            values[field.attribute] = field.decode(field.wire_name, raw)

    known = {field.wire_name for field in fields}
    unknown = [key for key in payload if key not in known]
    if unknown:
        logger.debug("Ignoring unknown wire keys: %s", ", ".join(map(str, unknown)))

    return values


def encode_values(source: Any, fields: Sequence[ContractField]) -> Dict[str, Any]:
    """Encode a contract object into a JSON-ready dict keyed by wire name."""

    document: Dict[str, Any] = {}
    for field in fields:
        value = getattr(source, field.attribute)
        if value is None:
            if not field.always_emitted:
                continue
            value = field.empty()
        document[field.wire_name] = field.encode(field.wire_name, value)
    return document


def resolve_field(fields: Sequence[ContractField], name: str) -> Optional[ContractField]:
    """Find a field by attribute name or wire name."""

    for field in fields:
        if name == field.attribute or name == field.wire_name:
            return field
    return None


__all__ = [
    "ContractField",
    "optional_int",
    "optional_str",
    "optional_timestamp",
    "str_tuple",
    "identity",
    "decode_payload",
    "encode_values",
    "resolve_field",
]
