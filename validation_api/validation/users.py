"""
Validation rules for POST /users.
"""

from validation_api.schemas.users import UserCreateRequest

from .rules import AbstractValidator

NAME_MAX_LENGTH = 100


class UserCreateRequestValidator(AbstractValidator[UserCreateRequest]):
    """
    Rules for UserCreateRequest.

    Name:
    - required (blank or absent fails)
    - at most 100 characters

    Email:
    - required (blank or absent fails)
    - must look like local@domain.tld when present
    """

    def __init__(self) -> None:
        super().__init__()
        self.rule_for("Name", lambda request: request.name) \
            .not_empty("Name is required.") \
            .maximum_length(NAME_MAX_LENGTH, f"Name cannot exceed {NAME_MAX_LENGTH} characters.")
        self.rule_for("Email", lambda request: request.email) \
            .not_empty("Email is required.") \
            .email_address("A valid email address is required.")
