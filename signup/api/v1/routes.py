"""
API v1 routes.

Defines REST endpoints for the signup API.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from signup.api.dependencies import get_locale, get_registration_service
from signup.api.models import (
    ErrorResponse,
    SignupPayload,
    SignupResponse,
    ValidationErrorResponse,
)
from signup.domain.exceptions import EmailDeliveryFailed, ValidationFailed
from signup.domain.messages import translate
from signup.domain.registration import RegistrationService

router = APIRouter(tags=["users"])


@router.post(
    "/users",
    response_model=SignupResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ValidationErrorResponse, "description": "Invalid or already used fields"},
        502: {"model": ErrorResponse, "description": "Activation email could not be sent"},
    },
    summary="Sign up a new user",
    description="Create an inactive user and email an activation token. "
    "Messages follow the Accept-Language header (en, tr).",
)
def register(
    request_data: SignupPayload | None = None,
    locale: str = Depends(get_locale),
    service: RegistrationService = Depends(get_registration_service),
) -> SignupResponse | JSONResponse:
    """
    Register a new user and send the activation email.

    - **username**: 4 to 32 characters
    - **email**: Valid, unused email address
    - **password**: At least 6 characters with upper, lower and digit
    """
    payload = request_data if request_data is not None else SignupPayload()
    try:
        service.register(payload.to_domain(), locale)
    except ValidationFailed as e:
        body = ValidationErrorResponse(
            message=translate("validation_failure", locale),
            validation_errors=e.errors,
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=body.model_dump(by_alias=True),
        )
    except EmailDeliveryFailed:
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content=ErrorResponse(message=translate("email_failure", locale)).model_dump(),
        )
    return SignupResponse(message=translate("user_create_success", locale))
