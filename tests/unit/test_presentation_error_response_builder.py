"""Unit tests for ErrorResponseBuilder.

Covers the error -> status mapping and the JSON error body, including the
rule that upstream messages and bodies never reach the caller.
"""

import json
from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest
from fastapi import status

from botrelay.core.enums import ErrorCode
from botrelay.core.errors import (
    ConfigurationError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from botrelay.domain.errors import (
    RetryBudgetExhaustedError,
    UpstreamAuthenticationError,
    UpstreamInvalidResponseError,
    UpstreamUnavailableError,
)
from botrelay.presentation.api.errors import ErrorResponseBuilder


@pytest.fixture(autouse=True)
def mock_logger() -> Iterator[MagicMock]:
    with patch(
        "botrelay.presentation.api.errors.error_response_builder.get_logger"
    ) as get_logger:
        yield get_logger.return_value


def body_of(response) -> dict:
    return json.loads(bytes(response.body).decode())


VALIDATION = ValidationError(
    code=ErrorCode.VALIDATION_FAILED,
    message="All fields are required.",
    fields=("authCode", "botName"),
)
NOT_FOUND = NotFoundError(
    code=ErrorCode.BOT_NOT_FOUND,
    message="Bot not found with the given nickname.",
    resource_type="bot",
    resource_id="Ghost",
)
CONFIG = ConfigurationError(
    code=ErrorCode.CONFIGURATION_MISSING,
    message="Server config error: API_TOKEN not set.",
    setting="api_token",
)
UNAVAILABLE = UpstreamUnavailableError(
    code=ErrorCode.UPSTREAM_UNAVAILABLE,
    message="FNLB API returned status 502",
    provider_name="fnlb",
    status_code=502,
    response_body="<html>bad gateway</html>",
)


@pytest.mark.unit
class TestStatusMapping:
    @pytest.mark.parametrize(
        ("error", "expected"),
        [
            (VALIDATION, status.HTTP_400_BAD_REQUEST),
            (NOT_FOUND, status.HTTP_404_NOT_FOUND),
            (CONFIG, status.HTTP_500_INTERNAL_SERVER_ERROR),
            (UNAVAILABLE, status.HTTP_503_SERVICE_UNAVAILABLE),
            (
                UpstreamAuthenticationError(
                    code=ErrorCode.UPSTREAM_AUTHENTICATION_FAILED,
                    message="rejected",
                    provider_name="fnlb",
                    status_code=401,
                ),
                status.HTTP_503_SERVICE_UNAVAILABLE,
            ),
            (
                RetryBudgetExhaustedError(
                    code=ErrorCode.UPSTREAM_RETRY_EXHAUSTED,
                    message="exhausted",
                    provider_name="fnlb",
                    status_code=429,
                    attempts=3,
                ),
                status.HTTP_503_SERVICE_UNAVAILABLE,
            ),
            (
                UpstreamInvalidResponseError(
                    code=ErrorCode.UPSTREAM_INVALID_RESPONSE,
                    message="bad json",
                    provider_name="fnlb",
                    status_code=200,
                ),
                status.HTTP_503_SERVICE_UNAVAILABLE,
            ),
            (
                DomainError(code=ErrorCode.INTERNAL_ERROR, message="?"),
                status.HTTP_500_INTERNAL_SERVER_ERROR,
            ),
        ],
    )
    def test_get_status_code(self, error: DomainError, expected: int):
        assert ErrorResponseBuilder.get_status_code(error) == expected


@pytest.mark.unit
class TestFromDomainError:
    def test_validation_body_lists_fields(self):
        response = ErrorResponseBuilder.from_domain_error(VALIDATION)

        assert response.status_code == 400
        assert body_of(response) == {
            "error": "All fields are required.",
            "kind": "validation_failed",
            "fields": ["authCode", "botName"],
        }

    def test_not_found_body(self, mock_logger: MagicMock):
        response = ErrorResponseBuilder.from_domain_error(
            NOT_FOUND, upstream_message="Failed to register bot."
        )

        assert body_of(response) == {
            "error": "Bot not found with the given nickname.",
            "kind": "bot_not_found",
        }
        mock_logger.info.assert_called_once()

    def test_upstream_body_uses_operation_message(self, mock_logger: MagicMock):
        response = ErrorResponseBuilder.from_domain_error(
            UNAVAILABLE, upstream_message="Failed to fetch public bots."
        )

        assert response.status_code == 503
        assert body_of(response) == {
            "error": "Failed to fetch public bots.",
            "kind": "upstream_unavailable",
            "upstreamStatus": 502,
        }
        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args.kwargs["upstream_body"] == "<html>bad gateway</html>"

    def test_config_error_keeps_message(self):
        response = ErrorResponseBuilder.from_domain_error(
            CONFIG, upstream_message="Failed to fetch categories."
        )

        assert response.status_code == 500
        assert body_of(response)["error"] == "Server config error: API_TOKEN not set."
