"""
Pydantic schemas for the user creation endpoint.

These models define the request/response contracts for POST /users.
Field-level rules (required, length, email shape) are NOT declared here:
they live in validation/users.py so the validation filter can report every
violation per field instead of failing on the first one.
"""

from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


# --- Request models ---

class UserCreateRequest(BaseModel):
    """
    Request body for POST /users.

    Both fields may be absent at binding time; absence is reported by
    UserCreateRequestValidator as "required", not as a binding failure.
    Instances are immutable once constructed.
    """
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "name": "Anton Havrylov",
                "email": "anton@example.com"
            }
        },
    )

    name: Optional[str] = Field(None, description="User's display name (max 100 characters)")
    email: Optional[str] = Field(None, description="User's email address")


# --- Response models ---

class UserCreateResponse(BaseModel):
    """
    Response after a user passes validation.
    """
    message: str = Field(
        ...,
        description="Success message embedding the submitted name",
        examples=["User Anton Havrylov created successfully!"]
    )


class ValidationProblemResponse(BaseModel):
    """
    Problem details body returned when binding or validation fails.

    Served with media type application/problem+json.
    """
    type: str = Field(
        "https://tools.ietf.org/html/rfc9110#section-15.5.1",
        description="Problem type URI"
    )
    title: str = Field(
        "One or more validation errors occurred.",
        description="Short human-readable summary"
    )
    status: int = Field(400, description="HTTP status code")
    errors: Dict[str, List[str]] = Field(
        ...,
        description="Violation messages keyed by field name",
        examples=[{"Name": ["Name is required."]}]
    )
