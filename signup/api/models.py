"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from signup.domain.ports import SignupRequest


class SignupPayload(BaseModel):
    """
    Request model for user signup.

    Fields are deliberately untyped: the domain validator reports missing
    or malformed values as localized field errors. Unknown keys such as
    ``inactive`` are dropped.
    """

    model_config = ConfigDict(extra="ignore")

    username: Any = Field(None, description="4 to 32 characters", examples=["user1"])
    email: Any = Field(None, description="Email address", examples=["user1@mail.com"])
    password: Any = Field(
        None,
        description="At least 6 characters with 1 uppercase, 1 lowercase and 1 digit",
        examples=["P4ssword"],
    )

    def to_domain(self) -> SignupRequest:
        return SignupRequest(username=self.username, email=self.email, password=self.password)


class SignupResponse(BaseModel):
    """Response model for successful signup."""

    message: str


class ValidationErrorResponse(BaseModel):
    """Response model for rejected signup, one message per failing field."""

    message: str
    validation_errors: dict[str, str] = Field(serialization_alias="validationErrors")


class ErrorResponse(BaseModel):
    """Standard error response model."""

    message: str
