"""
Domain: Customer contract JSON translation.

Wire format (JSON object):

    {
      "id": <integer, optional>,
      "fullName": <string, optional>,
      "lastReadTimestamp": <string "yyyy-MM-dd'T'HH:mm:ss.SSSSSSZ", optional>,
      "orderNumbers": [<string>, ...]   // optional; null or absent => []
    }

Behavior:
- Absent or null scalar keys decode to unset (None) and unset scalars are
  omitted on output, so absence survives a round trip.
- orderNumbers is always emitted, even when empty.
- Unknown keys are ignored.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional, Union

from .contract_fields import decode_payload, encode_values
from .customer import CUSTOMER_FIELDS, CustomerContract
from .errors import ContractFormatError, ContractShapeError


def deserialize_customer(payload: Optional[Mapping[str, Any]]) -> CustomerContract:
    """
    Build a CustomerContract from a decoded JSON object.

    Args:
        payload: Decoded JSON object, or None when the caller has no body.

    Returns:
        A fully constructed, immutable CustomerContract.

    Raises:
        ContractShapeError: payload is not an object, or a field has the wrong type.
        ContractFormatError: lastReadTimestamp does not match the fixed pattern.
    """

    if payload is None:
        return CustomerContract()
    if not isinstance(payload, Mapping):
        raise ContractShapeError(None, payload, "a JSON object")

    return CustomerContract(**decode_payload(payload, CUSTOMER_FIELDS))


def serialize_customer(contract: CustomerContract) -> Dict[str, Any]:
    """Render a CustomerContract as a JSON-ready dict keyed by wire name."""

    return encode_values(contract, CUSTOMER_FIELDS)


def customer_from_json(text: Union[str, bytes, bytearray, None]) -> CustomerContract:
    """
    Decode JSON text into a CustomerContract.

    An empty or missing body is treated as "no body" and yields the empty
    contract. Text that is not valid JSON raises ContractFormatError for the
    whole document.
    """

    if text is None or not text.strip():
        return CustomerContract()

    try:
        payload = json.loads(text)
    except (ValueError, RecursionError) as exc:
        # RecursionError: nesting deeper than the decoder can follow.
        raise ContractFormatError(None, text, "JSON") from exc

    return deserialize_customer(payload)


def customer_to_json(contract: CustomerContract) -> str:
    """Encode a CustomerContract as compact JSON text."""

    return json.dumps(serialize_customer(contract), separators=(",", ":"), ensure_ascii=False)


__all__ = [
    "deserialize_customer",
    "serialize_customer",
    "customer_from_json",
    "customer_to_json",
]
