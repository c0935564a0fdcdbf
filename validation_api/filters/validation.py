"""
Validation filter.

Gates the endpoint handler on two checks, in order:

1. Binding: a value of the expected model must be among the bound
   arguments; otherwise respond with the fixed "Body" problem.
2. Rules: when a validator is configured, its result must be empty;
   otherwise respond with the field -> messages mapping.

Only when both pass does the request continue down the chain. Both
failures are client errors and are answered here, never raised.
"""

from typing import Any, Generic, Optional, Type, TypeVar

from validation_api.utils.logging import get_logger
from validation_api.validation.registry import ValidatorRegistry
from validation_api.validation.rules import Validator

from .chain import EndpointHandler, FilterContext
from .problem import MISSING_BODY_ERRORS, validation_problem

logger = get_logger(__name__)

T = TypeVar("T")


class ValidationFilter(Generic[T]):
    """
    Endpoint filter validating the bound ``model`` argument.

    Holds no per-request state, so one instance serves concurrent requests.
    """

    def __init__(self, model: Type[T], validator: Optional[Validator[T]]) -> None:
        self.model = model
        self.validator = validator

        if validator is None:
            logger.warning(
                f"No validator configured for {model.__name__}; "
                "requests will only be checked for a bound body"
            )

    @classmethod
    def from_registry(cls, model: Type[T], registry: ValidatorRegistry) -> "ValidationFilter[T]":
        """Build a filter using whatever ``registry`` holds for ``model``."""
        return cls(model, registry.get(model))

    async def __call__(self, context: FilterContext, next: EndpointHandler) -> Any:
        request = context.request
        dto = context.get_argument(self.model)

        if dto is None:
            logger.info(
                f"Rejected {request.method} {request.url.path}: "
                f"body did not bind to {self.model.__name__}"
            )
            return validation_problem(MISSING_BODY_ERRORS)

        if self.validator is not None:
            result = self.validator.validate(dto)
            if not result.is_valid:
                logger.info(
                    f"Rejected {request.method} {request.url.path}: "
                    f"validation failed for fields {sorted(result.errors)}"
                )
                return validation_problem(result.to_dict())

        return await next(context)
