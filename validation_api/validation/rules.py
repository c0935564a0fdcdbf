"""
Declarative validation rules.

A validator subclasses AbstractValidator and declares its rules in
``__init__``::

    class SignupValidator(AbstractValidator[SignupRequest]):
        def __init__(self) -> None:
            super().__init__()
            self.rule_for("Name", lambda r: r.name) \\
                .not_empty("Name is required.") \\
                .maximum_length(100, "Name cannot exceed 100 characters.")

Every check of every rule runs on each call to ``validate``; failures are
collected, never short-circuited, so a client sees all problems at once.
"""

from typing import Any, Callable, Generic, List, Optional, Protocol, Tuple, TypeVar

from email_validator import EmailNotValidError, validate_email

from .result import ValidationResult

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)

Check = Tuple[Callable[[Any], bool], str]


def is_blank(value: Any) -> bool:
    """True for None, empty strings and whitespace-only strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    try:
        return len(value) == 0
    except TypeError:
        return False


def is_email_address(value: str) -> bool:
    """Syntax-only email check; the domain is never resolved."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


class Validator(Protocol[T_contra]):
    """Anything that turns a request instance into a ValidationResult."""

    def validate(self, instance: T_contra) -> ValidationResult:
        ...


class RuleBuilder(Generic[T]):
    """Ordered checks bound to one property of the validated type."""

    def __init__(self, property_name: str, getter: Callable[[T], Any]) -> None:
        self.property_name = property_name
        self._getter = getter
        self._checks: List[Check] = []

    def must(self, predicate: Callable[[Any], bool], message: str) -> "RuleBuilder[T]":
        """Fail with ``message`` when ``predicate(value)`` is false."""
        self._checks.append((predicate, message))
        return self

    def not_empty(self, message: Optional[str] = None) -> "RuleBuilder[T]":
        return self.must(
            lambda value: not is_blank(value),
            message or f"'{self.property_name}' must not be empty.",
        )

    def maximum_length(self, max_length: int, message: Optional[str] = None) -> "RuleBuilder[T]":
        return self.must(
            lambda value: value is None or len(value) <= max_length,
            message or f"'{self.property_name}' must be {max_length} characters or fewer.",
        )

    def email_address(self, message: Optional[str] = None) -> "RuleBuilder[T]":
        """Blank values pass; pair with not_empty to require a value."""
        return self.must(
            lambda value: is_blank(value) or is_email_address(value),
            message or f"'{self.property_name}' is not a valid email address.",
        )

    def evaluate(self, instance: T, result: ValidationResult) -> None:
        value = self._getter(instance)
        for predicate, message in self._checks:
            if not predicate(value):
                result.add_error(self.property_name, message)


class AbstractValidator(Generic[T]):
    """Base class for rule-based validators."""

    def __init__(self) -> None:
        self._rules: List[RuleBuilder[T]] = []

    def rule_for(self, property_name: str, getter: Callable[[T], Any]) -> RuleBuilder[T]:
        rule: RuleBuilder[T] = RuleBuilder(property_name, getter)
        self._rules.append(rule)
        return rule

    def validate(self, instance: T) -> ValidationResult:
        result = ValidationResult()
        for rule in self._rules:
            rule.evaluate(instance, result)
        return result
