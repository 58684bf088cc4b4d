"""Pydantic response schemas for the Ordering API.

Order read models live in ordering.projections; these cover the envelopes
the HTTP layer adds around workflow outcomes.
"""

from pydantic import BaseModel


class OrderIdResponse(BaseModel):
    order_id: str


class RedirectResponseBody(BaseModel):
    redirect: str


class FailureResponse(BaseModel):
    success: bool = False
    message: str

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "success": False,
                    "message": "User is not authenticated",
                }
            ]
        }
    }
