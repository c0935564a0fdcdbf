"""
User creation API endpoint.

POST /users is served through an explicit filter chain instead of FastAPI's
automatic body validation:

- Step 1: Bind → parse the JSON body into UserCreateRequest (may fail)
- Step 2: ValidationFilter → reject unbound bodies and rule violations
  with a 400 application/problem+json response
- Step 3: Handler → call the user service and map to UserCreateResponse
"""

from typing import Any

from fastapi import APIRouter, Request, status

from validation_api.filters import (
    PROBLEM_MEDIA_TYPE,
    FilterChain,
    FilterContext,
    ValidationFilter,
    bind_body,
)
from validation_api.schemas.users import (
    UserCreateRequest,
    UserCreateResponse,
    ValidationProblemResponse,
)
from validation_api.services import create_user
from validation_api.utils.logging import get_logger
from validation_api.validation import default_registry

logger = get_logger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


async def handle_create_user(context: FilterContext) -> UserCreateResponse:
    """Terminal stage: the body is bound and valid by the time we get here."""
    user_request = context.get_argument(UserCreateRequest)
    if user_request is None:
        raise RuntimeError("handle_create_user reached without a bound UserCreateRequest")

    result = create_user(user_request)
    return UserCreateResponse(message=result["message"])


create_user_pipeline = FilterChain(
    filters=[ValidationFilter.from_registry(UserCreateRequest, default_registry)],
    handler=handle_create_user,
)


@router.post(
    "",
    response_model=UserCreateResponse,
    status_code=status.HTTP_200_OK,
    summary="Create a user",
    description="""
    Validate and acknowledge a new user.

    Rules:
    - name is required and at most 100 characters
    - email is required and must be a valid email address

    Failures return 400 application/problem+json with violation
    messages keyed by field ("Name", "Email") or "Body" when the
    request body is missing or not a valid JSON object.
    """,
    responses={
        status.HTTP_400_BAD_REQUEST: {
            "model": ValidationProblemResponse,
            "description": "Body missing/invalid or field validation failed",
            "content": {PROBLEM_MEDIA_TYPE: {}},
        },
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": UserCreateRequest.model_json_schema()}
            },
        }
    },
)
async def create_user_endpoint(request: Request) -> Any:
    """
    Create a user.

    Bind
    - The raw body is parsed here so a missing or malformed body reaches
      the ValidationFilter instead of FastAPI's default 422 handler

    Filter
    - ValidationFilter short-circuits with a problem response on failure

    Call Service
    - create_user() builds the success message
    """
    user_request = await bind_body(request, UserCreateRequest)

    context = FilterContext(request=request)
    if user_request is not None:
        context.arguments.append(user_request)

    return await create_user_pipeline.invoke(context)
