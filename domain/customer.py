"""
Domain: Customer contract.

CustomerContract is the immutable, in-memory form of one customer record as
exchanged over JSON. It is a shape contract only: it carries no business logic
and performs no validation of meaning (no range or length checks).

Contract rules implemented here:
- The object is frozen. Every change produces a new instance.
- Scalar fields (id, full_name, last_read_timestamp) use None for "unset";
  they are never defaulted to 0, "" or a placeholder timestamp.
- order_numbers is never None. Absent or null collapses to an empty tuple.
- Construction enforces the same shapes the wire decoder enforces.

Wire mapping for each attribute is declared once in CUSTOMER_FIELDS.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from .contract_fields import (
    ContractField,
    identity,
    optional_int,
    optional_str,
    optional_timestamp,
    resolve_field,
    str_tuple,
)
from .errors import ContractShapeError
from .time import format_contract_timestamp, parse_contract_timestamp


def _decode_timestamp(name: str, value: Any) -> datetime:
    if not isinstance(value, str):
        raise ContractShapeError(name, value, "a timestamp string")
    return parse_contract_timestamp(name, value)


CUSTOMER_FIELDS: Tuple[ContractField, ...] = (
    ContractField("id", "id", decode=optional_int, encode=identity),
    ContractField("full_name", "fullName", decode=optional_str, encode=identity),
    ContractField(
        "last_read_timestamp",
        "lastReadTimestamp",
        decode=_decode_timestamp,
        encode=format_contract_timestamp,
    ),
    ContractField(
        "order_numbers",
        "orderNumbers",
        decode=str_tuple,
        encode=lambda name, value: list(value),
        empty=tuple,
    ),
)


@dataclass(frozen=True, slots=True)
class CustomerContract:
    """
    Immutable customer record as seen on the wire.

    `CustomerContract()` with no arguments is the empty contract: all scalars
    unset and no order numbers.
    """

    id: Optional[int] = None
    full_name: Optional[str] = None
    last_read_timestamp: Optional[datetime] = None
    order_numbers: Tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        optional_int("id", self.id)
        optional_str("fullName", self.full_name)
        optional_timestamp("lastReadTimestamp", self.last_read_timestamp)
        # Frozen: normalise list/None input through object.__setattr__.
        object.__setattr__(self, "order_numbers", str_tuple("orderNumbers", self.order_numbers))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def build(cls, **fields: Any) -> "CustomerContract":
        """
        Construct from any subset of fields, by attribute or wire name.

        Example:
            CustomerContract.build(id=5, fullName="Ada", order_numbers=None)
        """

        kwargs: Dict[str, Any] = {}
        for name, value in fields.items():
            spec = resolve_field(CUSTOMER_FIELDS, name)
            if spec is None:
                raise TypeError(f"CustomerContract has no field {name!r}")
            if spec.attribute in kwargs:
                raise TypeError(f"Field {spec.attribute!r} given more than once")
            kwargs[spec.attribute] = value
        return cls(**kwargs)

    @staticmethod
    def builder() -> "CustomerContractBuilder":
        return CustomerContractBuilder()

    # ------------------------------------------------------------------
    # Derivation
    # ------------------------------------------------------------------

    def with_field(self, name: str, value: Any) -> "CustomerContract":
        """
        Return a copy with exactly one field replaced.

        `name` may be the attribute name or the wire name. This instance is
        left unchanged.
        """

        spec = resolve_field(CUSTOMER_FIELDS, name)
        if spec is None:
            raise ValueError(f"CustomerContract has no field {name!r}")
        return replace(self, **{spec.attribute: value})

    def with_id(self, value: Optional[int]) -> "CustomerContract":
        return replace(self, id=value)

    def with_full_name(self, value: Optional[str]) -> "CustomerContract":
        return replace(self, full_name=value)

    def with_last_read_timestamp(self, value: Optional[datetime]) -> "CustomerContract":
        return replace(self, last_read_timestamp=value)

    def with_order_numbers(self, value: Any) -> "CustomerContract":
        return replace(self, order_numbers=value)


class CustomerContractBuilder:
    """
    Fluent, reusable builder for CustomerContract.

    Unset fields keep their contract defaults. Each build() returns a new
    contract; the builder itself can keep being modified afterwards.
    """

    def __init__(self) -> None:
        self._values: Dict[str, Any] = {}

    def id(self, value: Optional[int]) -> "CustomerContractBuilder":
        self._values["id"] = value
        return self

    def full_name(self, value: Optional[str]) -> "CustomerContractBuilder":
        self._values["full_name"] = value
        return self

    def last_read_timestamp(self, value: Optional[datetime]) -> "CustomerContractBuilder":
        self._values["last_read_timestamp"] = value
        return self

    def order_numbers(self, value: Any) -> "CustomerContractBuilder":
        self._values["order_numbers"] = value
        return self

    def build(self) -> CustomerContract:
        return CustomerContract(**self._values)

    def __repr__(self) -> str:
        return f"CustomerContractBuilder({self._values!r})"


__all__ = ["CUSTOMER_FIELDS", "CustomerContract", "CustomerContractBuilder"]
