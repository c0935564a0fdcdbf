"""
Problem details responses for binding and validation failures.
"""

from typing import Dict, List

from fastapi import status
from fastapi.responses import JSONResponse

from validation_api.schemas.users import ValidationProblemResponse

PROBLEM_MEDIA_TYPE = "application/problem+json"

MISSING_BODY_ERRORS: Dict[str, List[str]] = {
    "Body": ["Request body is missing or invalid."]
}


def validation_problem(errors: Dict[str, List[str]]) -> JSONResponse:
    """
    Build a 400 problem response carrying ``errors``.

    Example body:
        {
            "type": "https://tools.ietf.org/html/rfc9110#section-15.5.1",
            "title": "One or more validation errors occurred.",
            "status": 400,
            "errors": {"Name": ["Name is required."]}
        }
    """
    problem = ValidationProblemResponse(
        status=status.HTTP_400_BAD_REQUEST,
        errors=errors,
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=problem.model_dump(),
        media_type=PROBLEM_MEDIA_TYPE,
    )
