"""
Endpoint filters: the ordered request pipeline that runs before a handler.
"""

from .binding import bind_body
from .chain import EndpointFilter, EndpointHandler, FilterChain, FilterContext
from .problem import MISSING_BODY_ERRORS, PROBLEM_MEDIA_TYPE, validation_problem
from .validation import ValidationFilter

__all__ = [
    "EndpointFilter",
    "EndpointHandler",
    "FilterChain",
    "FilterContext",
    "MISSING_BODY_ERRORS",
    "PROBLEM_MEDIA_TYPE",
    "ValidationFilter",
    "bind_body",
    "validation_problem",
]
