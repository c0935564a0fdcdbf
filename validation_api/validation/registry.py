"""
Validator registry.

Maps a request type to the single validator that checks it. Validators
are registered explicitly at import time; there is no discovery.
"""

from typing import Any, Dict, Optional, Type

from validation_api.schemas.users import UserCreateRequest
from validation_api.utils.logging import get_logger

from .rules import Validator
from .users import UserCreateRequestValidator

logger = get_logger(__name__)


class ValidatorRegistry:
    """Explicit type -> validator mapping."""

    def __init__(self) -> None:
        self._validators: Dict[type, Validator[Any]] = {}

    def register(self, model: Type[Any], validator: Validator[Any]) -> None:
        """
        Register ``validator`` for ``model``.

        Raises:
            ValueError: If ``model`` already has a validator.
        """
        if model in self._validators:
            raise ValueError(f"A validator is already registered for {model.__name__}")

        self._validators[model] = validator
        logger.debug(f"Registered {type(validator).__name__} for {model.__name__}")

    def get(self, model: Type[Any]) -> Optional[Validator[Any]]:
        """Return the validator for ``model``, or None when unregistered."""
        return self._validators.get(model)

    def __contains__(self, model: object) -> bool:
        return model in self._validators


default_registry = ValidatorRegistry()
default_registry.register(UserCreateRequest, UserCreateRequestValidator())
