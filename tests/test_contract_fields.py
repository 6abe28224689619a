"""
Tests for `domain/contract_fields.py`.

Covers contract rules:
- Absent or null wire keys stay unset unless the field declares an empty value.
- Fields with an empty value collapse absent/null to it and are always emitted.
- Unset fields without an empty value are omitted on output.
- Unknown wire keys are ignored (and logged at DEBUG).
- Shape helpers reject the wrong JSON type, including bool for integers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import pytest

from domain.contract_fields import (
    ContractField,
    decode_payload,
    encode_values,
    identity,
    optional_int,
    optional_str,
    resolve_field,
    str_tuple,
)
from domain.errors import ContractShapeError


@dataclass(frozen=True)
class _Sample:
    count: Optional[int]
    tags: Tuple[str, ...]


SAMPLE_FIELDS = (
    ContractField("count", "itemCount", decode=optional_int, encode=identity),
    ContractField("tags", "tags", decode=str_tuple, encode=lambda name, value: list(value), empty=tuple),
)


def test_decode_payload_maps_wire_names_to_attributes() -> None:
    """Verify decoded values are keyed by attribute name."""

    assert decode_payload({"itemCount": 3, "tags": ["a"]}, SAMPLE_FIELDS) == {"count": 3, "tags": ("a",)}


@pytest.mark.parametrize("payload", [{}, {"itemCount": None, "tags": None}])
def test_decode_payload_absent_and_null(payload: dict) -> None:
    """Verify absent/null leave scalars unset and collapse fields with an empty value."""

    assert decode_payload(payload, SAMPLE_FIELDS) == {"count": None, "tags": ()}


def test_decode_payload_ignores_and_logs_unknown_keys(caplog: pytest.LogCaptureFixture) -> None:
    """Verify unknown wire keys are dropped and reported at DEBUG level."""

    with caplog.at_level(logging.DEBUG, logger="domain.contract_fields"):
        values = decode_payload({"itemCount": 1, "extra": True, "count": 9}, SAMPLE_FIELDS)

    assert values == {"count": 1, "tags": ()}
    assert "extra" in caplog.text
    assert "count" in caplog.text


def test_encode_values_omits_unset_and_always_emits_collapsing_fields() -> None:
    """Verify unset scalars are omitted while collapsing fields are emitted empty."""

    assert encode_values(_Sample(count=None, tags=()), SAMPLE_FIELDS) == {"tags": []}
    assert encode_values(_Sample(count=0, tags=("x",)), SAMPLE_FIELDS) == {"itemCount": 0, "tags": ["x"]}


def test_encode_values_substitutes_empty_for_none() -> None:
    """Verify a None slipped into a collapsing field still encodes as empty."""

    assert encode_values(_Sample(count=None, tags=None), SAMPLE_FIELDS) == {"tags": []}  # type: ignore[arg-type]


def test_resolve_field_accepts_attribute_and_wire_names() -> None:
    """Verify lookup works for both naming schemes and returns None when unknown."""

    assert resolve_field(SAMPLE_FIELDS, "count") is SAMPLE_FIELDS[0]
    assert resolve_field(SAMPLE_FIELDS, "itemCount") is SAMPLE_FIELDS[0]
    assert resolve_field(SAMPLE_FIELDS, "missing") is None


@pytest.mark.parametrize("value", [True, False, 1.0, "1", [1]])
def test_optional_int_rejects_non_integers(value: object) -> None:
    """Verify bool, float, string and list values are not accepted as integers."""

    with pytest.raises(ContractShapeError):
        optional_int("id", value)


def test_optional_str_rejects_non_strings() -> None:
    """Verify a number is not accepted as text."""

    with pytest.raises(ContractShapeError) as excinfo:
        optional_str("fullName", 42)

    assert excinfo.value.field == "fullName"
    assert excinfo.value.value == 42


@pytest.mark.parametrize("value", ["abc", {"a": "b"}, 7, ["ok", 1], [None]])
def test_str_tuple_rejects_non_string_arrays(value: object) -> None:
    """Verify only arrays of strings are accepted; a bare string is rejected."""

    with pytest.raises(ContractShapeError):
        str_tuple("orderNumbers", value)


def test_str_tuple_preserves_order() -> None:
    """Verify insertion order is preserved and None collapses to empty."""

    assert str_tuple("orderNumbers", ["b", "a", "b"]) == ("b", "a", "b")
    assert str_tuple("orderNumbers", None) == ()
