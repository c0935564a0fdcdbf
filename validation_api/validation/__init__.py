"""
Request validation: declarative rules, results and the validator registry.
"""

from .registry import ValidatorRegistry, default_registry
from .result import ValidationResult
from .rules import AbstractValidator, RuleBuilder, Validator
from .users import UserCreateRequestValidator

__all__ = [
    "AbstractValidator",
    "RuleBuilder",
    "UserCreateRequestValidator",
    "ValidationResult",
    "Validator",
    "ValidatorRegistry",
    "default_registry",
]
