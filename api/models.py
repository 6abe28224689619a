"""
API Response Models.

Pydantic models for bodies a Service Host returns when it rejects a
customer contract payload.
"""

from typing import Optional

from pydantic import BaseModel


# ============================================================================
# Error Models
# ============================================================================

class ErrorResponse(BaseModel):
    """Standard error response for a rejected contract payload."""
    error: str  # "ContractFormatError" or "ContractShapeError"
    detail: Optional[str] = None
    field: Optional[str] = None  # wire name, or None for the whole document
    status_code: int

    class Config:
        json_schema_extra = {
            "example": {
                "error": "ContractFormatError",
                "detail": "lastReadTimestamp must match pattern "
                          "\"yyyy-MM-dd'T'HH:mm:ss.SSSSSSZ\", got 'not-a-date'",
                "field": "lastReadTimestamp",
                "status_code": 400
            }
        }
