"""
Domain: contract translation errors.

Only two kinds of failure exist when translating between the JSON wire format
and contract objects:
- ContractFormatError: a field's text does not match its fixed pattern.
- ContractShapeError: a field (or the whole document) has the wrong JSON type.

Both are local and non-retryable. They propagate to the caller, which is
expected to reject the payload.
"""

from __future__ import annotations

from typing import Any, Optional


class ContractError(ValueError):
    """
    Base class for contract translation failures.

    Attributes:
        field: Wire name of the offending field, or None for the whole document.
        value: The raw offending value as received.
    """

    def __init__(self, field: Optional[str], value: Any, message: str) -> None:
        self.field = field
        self.value = value
        super().__init__(message)


class ContractFormatError(ContractError):
    """Raised when a field's textual representation does not match its pattern."""

    def __init__(self, field: Optional[str], value: Any, pattern: str) -> None:
        self.pattern = pattern
        target = field if field is not None else "document"
        super().__init__(field, value, f"{target} must match pattern {pattern!r}, got {value!r}")


class ContractShapeError(ContractError):
    """Raised when a field's JSON type does not match the expected shape."""

    def __init__(self, field: Optional[str], value: Any, expected: str) -> None:
        self.expected = expected
        target = field if field is not None else "document"
        super().__init__(
            field,
            value,
            f"{target} must be {expected}, got {type(value).__name__}: {value!r}",
        )


__all__ = ["ContractError", "ContractFormatError", "ContractShapeError"]
