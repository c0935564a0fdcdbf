"""
User service.

Produces the creation acknowledgement for an already-validated request.
Nothing is persisted.
"""

from typing import Dict

from validation_api.schemas.users import UserCreateRequest
from validation_api.utils.logging import get_logger

logger = get_logger(__name__)


def create_user(request: UserCreateRequest) -> Dict[str, str]:
    """
    Acknowledge a user creation request.

    Args:
        request: A request that already passed UserCreateRequestValidator

    Returns:
        Dict with the success "message" embedding the submitted name
    """
    logger.info("User creation request accepted")

    return {"message": f"User {request.name} created successfully!"}
