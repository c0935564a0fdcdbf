"""
Tests for ValidationFilter.

Tests cover:
- Step 1: missing bound body → "Body" problem, handler not called
- Step 2: rule violations → field problem, handler not called
- Step 3: valid request → handler result returned unchanged
- No validator configured → body check only
"""

import asyncio
import json
import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from validation_api.filters import PROBLEM_MEDIA_TYPE, ValidationFilter
from validation_api.schemas.users import UserCreateRequest
from validation_api.validation import (
    UserCreateRequestValidator,
    ValidationResult,
    ValidatorRegistry,
    default_registry,
)


def problem_body(response):
    return json.loads(response.body)


@pytest.fixture
def user_filter():
    return ValidationFilter(UserCreateRequest, UserCreateRequestValidator())


class TestBindingCheck:

    @pytest.mark.asyncio
    async def test_missing_body_short_circuits(self, user_filter, filter_context):
        next_step = AsyncMock()

        response = await user_filter(filter_context(), next_step)

        next_step.assert_not_called()
        assert response.status_code == 400
        assert response.media_type == PROBLEM_MEDIA_TYPE
        assert problem_body(response)["errors"] == {
            "Body": ["Request body is missing or invalid."]
        }

    @pytest.mark.asyncio
    async def test_argument_of_other_type_is_not_enough(self, user_filter, filter_context):
        next_step = AsyncMock()

        response = await user_filter(filter_context({"name": "Anton"}), next_step)

        next_step.assert_not_called()
        assert "Body" in problem_body(response)["errors"]


class TestRuleCheck:

    @pytest.mark.asyncio
    async def test_invalid_request_short_circuits(self, user_filter, filter_context):
        next_step = AsyncMock()
        dto = UserCreateRequest(name="", email="not-an-email")

        response = await user_filter(filter_context(dto), next_step)

        next_step.assert_not_called()
        body = problem_body(response)
        assert body["status"] == 400
        assert body["title"] == "One or more validation errors occurred."
        assert body["errors"] == {
            "Name": ["Name is required."],
            "Email": ["A valid email address is required."],
        }

    @pytest.mark.asyncio
    async def test_valid_request_passes_through(self, user_filter, filter_context):
        sentinel = object()
        next_step = AsyncMock(return_value=sentinel)
        context = filter_context(UserCreateRequest(name="Anton", email="anton@example.com"))

        result = await user_filter(context, next_step)

        assert result is sentinel
        next_step.assert_awaited_once_with(context)

    @pytest.mark.asyncio
    async def test_uses_injected_validator(self, filter_context):
        validator = MagicMock()
        failing = ValidationResult()
        failing.add_error("Custom", "custom failure")
        validator.validate.return_value = failing
        dto = UserCreateRequest(name="Anton", email="anton@example.com")

        response = await ValidationFilter(UserCreateRequest, validator)(
            filter_context(dto), AsyncMock()
        )

        validator.validate.assert_called_once_with(dto)
        assert problem_body(response)["errors"] == {"Custom": ["custom failure"]}


class TestConcurrentUse:

    @pytest.mark.asyncio
    async def test_one_instance_serves_interleaved_requests(self, user_filter, filter_context):
        async def next_step(context):
            await asyncio.sleep(0)
            return context.get_argument(UserCreateRequest).name

        valid = filter_context(UserCreateRequest(name="Anton", email="anton@example.com"))
        invalid = filter_context(UserCreateRequest(name="", email="not-an-email"))
        other_valid = filter_context(UserCreateRequest(name="Olena", email="olena@example.com"))

        first, second, third = await asyncio.gather(
            user_filter(valid, next_step),
            user_filter(invalid, next_step),
            user_filter(other_valid, next_step),
        )

        assert first == "Anton"
        assert third == "Olena"
        assert problem_body(second)["errors"] == {
            "Name": ["Name is required."],
            "Email": ["A valid email address is required."],
        }


class TestWithoutValidator:

    @pytest.mark.asyncio
    async def test_skips_rules_but_still_requires_body(self, filter_context):
        no_rules = ValidationFilter(UserCreateRequest, None)
        next_step = AsyncMock(return_value="handled")

        passed = await no_rules(filter_context(UserCreateRequest(name="", email="")), next_step)
        blocked = await no_rules(filter_context(), AsyncMock())

        assert passed == "handled"
        assert problem_body(blocked)["errors"] == {
            "Body": ["Request body is missing or invalid."]
        }

    def test_warns_when_constructed_without_validator(self, caplog):
        with caplog.at_level(logging.WARNING):
            ValidationFilter(UserCreateRequest, None)

        assert "No validator configured for UserCreateRequest" in caplog.text


class TestFromRegistry:

    def test_resolves_registered_validator(self):
        resolved = ValidationFilter.from_registry(UserCreateRequest, default_registry)

        assert isinstance(resolved.validator, UserCreateRequestValidator)

    def test_unregistered_model_has_no_validator(self):
        resolved = ValidationFilter.from_registry(UserCreateRequest, ValidatorRegistry())

        assert resolved.validator is None
