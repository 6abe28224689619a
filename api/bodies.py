"""
Customer Contract Request and Response Bodies.

Glue a Service Host uses to move CustomerContract values in and out of HTTP:
- `read_customer_contract` is a FastAPI dependency that decodes the raw body.
- `CustomerContractResponse` renders a contract using its wire mapping.

Neither registers routes; the host decides where they are used.
"""

from __future__ import annotations

from typing import Any, Mapping

from fastapi import Request
from fastapi.responses import JSONResponse

from domain.customer import CUSTOMER_FIELDS, CustomerContract
from domain.customer_json import customer_from_json, serialize_customer

# Attribute names that differ from their wire names (full_name, ...).
_ATTRIBUTE_ONLY_NAMES = frozenset(
    field.attribute for field in CUSTOMER_FIELDS if field.attribute != field.wire_name
)


async def read_customer_contract(request: Request) -> CustomerContract:
    """
    Decode the request body into a CustomerContract.

    An empty body yields the empty contract. Contract errors propagate so the
    handlers from `api.errors` can turn them into 400 responses.

    Example:
        @router.put("/customers/{customer_id}")
        def replace_customer(customer: CustomerContract = Depends(read_customer_contract)):
            ...
    """
    body = await request.body()
    return customer_from_json(body)


class CustomerContractResponse(JSONResponse):
    """
    JSON response that renders CustomerContract values by wire name.

    Construct it directly from the route: `return CustomerContractResponse(customer)`.
    Used only as `response_class=`, FastAPI flattens the returned dataclass with
    `jsonable_encoder` before `render` sees it, losing the wire mapping. Such
    flattened content is refused with a TypeError rather than emitted.
    """

    def render(self, content: Any) -> bytes:
        if isinstance(content, CustomerContract):
            content = serialize_customer(content)
        elif isinstance(content, (list, tuple)):
            content = [
                serialize_customer(item) if isinstance(item, CustomerContract) else item
                for item in content
            ]
            for item in content:
                _reject_flattened(item)
        else:
            _reject_flattened(content)
        return super().render(content)


def _reject_flattened(content: Any) -> None:
    if isinstance(content, Mapping) and _ATTRIBUTE_ONLY_NAMES.intersection(content):
        raise TypeError(
            "CustomerContractResponse received a flattened CustomerContract "
            f"(keys {sorted(content)!r}); return CustomerContractResponse(customer) "
            "from the route instead of relying on response_class"
        )


__all__ = ["read_customer_contract", "CustomerContractResponse"]
