"""Pydantic models describing the offer letter payload and API responses."""
from __future__ import annotations

import datetime as dt
from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, EmailStr, Field, FiniteFloat, field_validator
from pydantic.alias_generators import to_camel

EmploymentType = Literal["full-time", "part-time", "contract", "internship"]


class OfferLetterPayload(BaseModel):
    """Offer letter submission forwarded to the n8n workflow."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    candidate_name: str = Field(..., min_length=1, max_length=200)
    candidate_email: EmailStr
    candidate_address: Optional[str] = Field(default=None, max_length=500)
    position: str = Field(..., min_length=1, max_length=200)
    department: Optional[str] = Field(default=None, max_length=200)
    start_date: dt.date
    salary: Union[int, FiniteFloat] = Field(..., gt=0)
    currency: str = Field(default="USD", pattern=r"^[A-Z]{3}$")
    employment_type: EmploymentType = "full-time"
    reporting_manager: Optional[str] = Field(default=None, max_length=200)
    company_name: Optional[str] = Field(default=None, max_length=200)
    benefits: List[str] = Field(default_factory=list)
    offer_expiry_date: Optional[dt.date] = None
    additional_notes: Optional[str] = Field(default=None, max_length=5000)

    @field_validator("candidate_name", "position")
    @classmethod
    def _reject_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    def to_webhook_json(self) -> dict[str, Any]:
        """Return the JSON-ready body sent to the webhook."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class SubmitSuccessResponse(BaseModel):
    success: bool = Field(..., description="Always true for accepted submissions.")
    message: str = Field(..., description="Human readable outcome.")
    data: Optional[Any] = Field(default=None, description="Parsed webhook response body.")
    note: Optional[str] = Field(default=None, description="Present in demo mode only.")


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Short error label.")
    details: Optional[Any] = Field(
        default=None,
        description="Validation issues or the downstream error text.",
    )
    message: Optional[str] = Field(default=None, description="Underlying failure message.")


class HealthResponse(BaseModel):
    """Schema describing the payload returned by the health-check endpoint."""

    status: str = Field(..., description="Always 'ok' while the process is serving.")
    timestamp: str = Field(..., description="Current UTC time in ISO-8601 format.")


__all__ = [
    "EmploymentType",
    "ErrorResponse",
    "HealthResponse",
    "OfferLetterPayload",
    "SubmitSuccessResponse",
]
