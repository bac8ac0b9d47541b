"""Response envelope shared by all API endpoints.

Every response body has the shape::

    {"success": bool, "message"?: str, "data"?: ..., "errors"?: {...}, "meta"?: {...}}

Keys that were not set are left out of the JSON (routes are declared with
``response_model_exclude_unset=True``).
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    """Successful response carrying an optional payload."""

    success: bool = Field(..., description="Whether the request succeeded")
    message: str | None = Field(None, description="Human-readable summary")
    data: DataT | None = Field(None, description="Response payload")
    meta: dict[str, Any] | None = Field(None, description="Pagination and extras")

    @classmethod
    def ok(
        cls,
        data: Any = None,
        message: str | None = None,
        meta: dict[str, Any] | None = None,
    ) -> "ApiResponse[DataT]":
        """Build a success envelope, setting only the fields that were given."""
        fields: dict[str, Any] = {"success": True}
        if message is not None:
            fields["message"] = message
        if data is not None:
            fields["data"] = data
        if meta is not None:
            fields["meta"] = meta
        return cls(**fields)


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    success: bool = Field(False, description="Always false for errors")
    message: str = Field(..., description="Error message")
    errors: dict[str, list[str]] | None = Field(
        None,
        description="Messages keyed by the offending field",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": False,
                "message": "Validation failed",
                "errors": {"email": ["value is not a valid email address"]},
            },
        },
    )


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")


class MessageResponse(BaseModel):
    """Successful response without payload."""

    success: bool = Field(..., description="Whether the request succeeded")
    message: str = Field(..., description="Human-readable summary")
