"""Validation result: field-keyed violation messages."""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class ValidationResult:
    """The outcome of running a validator against one request.

    ``errors`` maps field names to violation messages in the order the
    rules were declared::

        {"Name": ["Name is required."],
         "Email": ["A valid email address is required."]}

    A field only appears once it has failed at least one rule, so the
    request is valid exactly when ``errors`` is empty.
    """

    errors: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        """True if validation passed with no errors."""
        return not self.errors

    def __bool__(self) -> bool:
        return self.is_valid

    def add_error(self, property_name: str, message: str) -> None:
        self.errors.setdefault(property_name, []).append(message)

    def to_dict(self) -> Dict[str, List[str]]:
        """Copy of the error mapping, safe to hand to a response body."""
        return {name: list(messages) for name, messages in self.errors.items()}
