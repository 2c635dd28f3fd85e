"""Tests for botrelay/infrastructure/upstream/resilient_fetcher.py.

Verifies the bounded 429 retry loop: Retry-After handling, the attempt
budget, and that every other failure is returned on the first attempt
without waiting.
"""

import asyncio
from collections.abc import Iterator
from datetime import UTC, datetime, timedelta
from email.utils import format_datetime
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from botrelay.core.enums import ErrorCode
from botrelay.core.result import Failure, Success
from botrelay.domain.errors import (
    RetryBudgetExhaustedError,
    UpstreamAuthenticationError,
    UpstreamUnavailableError,
)
from botrelay.infrastructure.upstream.resilient_fetcher import ResilientFetcher

URL = "https://api.test.com/bots"


def rate_limited(retry_after: str | None = None) -> httpx.Response:
    headers = {"Retry-After": retry_after} if retry_after is not None else {}
    return httpx.Response(429, headers=headers)


def ok(payload: object = None) -> httpx.Response:
    return httpx.Response(200, json=payload if payload is not None else [])


@pytest.fixture
def mock_client() -> Iterator[AsyncMock]:
    """Patch httpx.AsyncClient and yield the client used inside ``async with``."""
    with patch("httpx.AsyncClient") as mock_client_class:
        client = AsyncMock()
        client.__aenter__.return_value = client
        client.__aexit__.return_value = None
        mock_client_class.return_value = client
        yield client


@pytest.fixture
def sleep() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def fetcher(sleep: AsyncMock) -> ResilientFetcher:
    return ResilientFetcher(
        provider_name="test_provider",
        max_retries=3,
        retry_after_default=10.0,
        sleep=sleep,
    )


class TestResilientFetcherInit:
    """Tests for constructor validation."""

    def test_rejects_zero_retries(self) -> None:
        with pytest.raises(ValueError):
            ResilientFetcher(max_retries=0)

    def test_rejects_negative_default_wait(self) -> None:
        with pytest.raises(ValueError):
            ResilientFetcher(retry_after_default=-1)

    def test_exposes_budget(self) -> None:
        assert ResilientFetcher(max_retries=5).max_retries == 5

    def test_rejects_ceiling_below_default_wait(self) -> None:
        with pytest.raises(ValueError):
            ResilientFetcher(retry_after_default=10.0, retry_after_max=5.0)


class TestFetchRetries:
    """Tests for the retry loop."""

    @pytest.mark.asyncio
    async def test_returns_first_success_without_sleeping(
        self, fetcher: ResilientFetcher, mock_client: AsyncMock, sleep: AsyncMock
    ) -> None:
        mock_client.get.return_value = ok([{"nickname": "a"}])

        result = await fetcher.fetch(URL, headers={"Authorization": "key"})

        assert isinstance(result, Success)
        assert result.value.status_code == 200
        mock_client.get.assert_awaited_once_with(URL, headers={"Authorization": "key"})
        sleep.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_retries_after_rate_limit_then_succeeds(
        self, fetcher: ResilientFetcher, mock_client: AsyncMock, sleep: AsyncMock
    ) -> None:
        """[429 (1s), 429 (1s), 200] with a budget of 3 succeeds after >= 2s."""
        mock_client.get.side_effect = [rate_limited("1"), rate_limited("1"), ok()]

        result = await fetcher.fetch(URL, headers={}, max_retries=3)

        assert isinstance(result, Success)
        assert mock_client.get.await_count == 3
        waits = [call.args[0] for call in sleep.await_args_list]
        assert waits == [1.0, 1.0]
        assert sum(waits) >= 2

    @pytest.mark.asyncio
    async def test_exhausts_budget_on_repeated_rate_limits(
        self, fetcher: ResilientFetcher, mock_client: AsyncMock, sleep: AsyncMock
    ) -> None:
        """Three 429s with a budget of 3 fail with no fourth attempt."""
        mock_client.get.side_effect = [
            rate_limited("1"),
            rate_limited("1"),
            rate_limited("1"),
            ok(),
        ]

        result = await fetcher.fetch(URL, headers={}, max_retries=3)

        assert isinstance(result, Failure)
        assert isinstance(result.error, RetryBudgetExhaustedError)
        assert result.error.code == ErrorCode.UPSTREAM_RETRY_EXHAUSTED
        assert result.error.attempts == 3
        assert result.error.status_code == 429
        assert mock_client.get.await_count == 3
        # No wait after the final attempt
        assert sleep.await_count == 2

    @pytest.mark.asyncio
    async def test_missing_retry_after_uses_default(
        self, fetcher: ResilientFetcher, mock_client: AsyncMock, sleep: AsyncMock
    ) -> None:
        mock_client.get.side_effect = [rate_limited(), ok()]

        result = await fetcher.fetch(URL, headers={})

        assert isinstance(result, Success)
        sleep.assert_awaited_once_with(10.0)

    @pytest.mark.asyncio
    async def test_unparseable_retry_after_uses_default(
        self, fetcher: ResilientFetcher, mock_client: AsyncMock, sleep: AsyncMock
    ) -> None:
        mock_client.get.side_effect = [rate_limited("soon"), ok()]

        await fetcher.fetch(URL, headers={})

        sleep.assert_awaited_once_with(10.0)

    @pytest.mark.asyncio
    async def test_long_retry_after_is_capped(
        self, mock_client: AsyncMock, sleep: AsyncMock
    ) -> None:
        fetcher = ResilientFetcher(retry_after_default=10.0, retry_after_max=20.0, sleep=sleep)
        mock_client.get.side_effect = [rate_limited("86400"), ok()]

        result = await fetcher.fetch(URL, headers={})

        assert isinstance(result, Success)
        sleep.assert_awaited_once_with(20.0)

    @pytest.mark.asyncio
    async def test_uses_instance_budget_by_default(
        self, mock_client: AsyncMock, sleep: AsyncMock
    ) -> None:
        fetcher = ResilientFetcher(max_retries=2, sleep=sleep)
        mock_client.get.side_effect = [rate_limited("0"), rate_limited("0"), ok()]

        result = await fetcher.fetch(URL, headers={})

        assert isinstance(result, Failure)
        assert isinstance(result.error, RetryBudgetExhaustedError)
        assert mock_client.get.await_count == 2

    @pytest.mark.asyncio
    async def test_rejects_invalid_call_budget(
        self, fetcher: ResilientFetcher, mock_client: AsyncMock
    ) -> None:
        with pytest.raises(ValueError):
            await fetcher.fetch(URL, headers={}, max_retries=0)
        mock_client.get.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_wait_does_not_block_other_tasks(self, mock_client: AsyncMock) -> None:
        """Other tasks keep running while a rate-limited fetch waits."""
        fetcher = ResilientFetcher(max_retries=2)
        mock_client.get.side_effect = [rate_limited("0.2"), ok()]
        events: list[str] = []

        async def fetch() -> object:
            result = await fetcher.fetch(URL, headers={})
            events.append("fetched")
            return result

        async def ticker() -> None:
            for _ in range(3):
                await asyncio.sleep(0.01)
                events.append("tick")

        result, _ = await asyncio.gather(fetch(), ticker())

        assert isinstance(result, Success)
        assert events == ["tick", "tick", "tick", "fetched"]


class TestFetchFailures:
    """Non-429 failures are returned immediately."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [400, 404, 500, 502, 503])
    async def test_error_status_is_not_retried(
        self,
        fetcher: ResilientFetcher,
        mock_client: AsyncMock,
        sleep: AsyncMock,
        status_code: int,
    ) -> None:
        mock_client.get.side_effect = [httpx.Response(status_code, text="boom"), ok()]

        result = await fetcher.fetch(URL, headers={})

        assert isinstance(result, Failure)
        assert isinstance(result.error, UpstreamUnavailableError)
        assert result.error.status_code == status_code
        assert result.error.response_body == "boom"
        assert mock_client.get.await_count == 1
        sleep.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [401, 403])
    async def test_rejected_credential(
        self,
        fetcher: ResilientFetcher,
        mock_client: AsyncMock,
        status_code: int,
    ) -> None:
        mock_client.get.return_value = httpx.Response(status_code)

        result = await fetcher.fetch(URL, headers={})

        assert isinstance(result, Failure)
        assert isinstance(result.error, UpstreamAuthenticationError)
        assert result.error.code == ErrorCode.UPSTREAM_AUTHENTICATION_FAILED
        assert result.error.status_code == status_code

    @pytest.mark.asyncio
    async def test_timeout_is_not_retried(
        self, fetcher: ResilientFetcher, mock_client: AsyncMock, sleep: AsyncMock
    ) -> None:
        mock_client.get.side_effect = httpx.TimeoutException("Timeout")

        result = await fetcher.fetch(URL, headers={})

        assert isinstance(result, Failure)
        assert isinstance(result.error, UpstreamUnavailableError)
        assert result.error.status_code is None
        assert "timed out" in result.error.message.lower()
        assert mock_client.get.await_count == 1
        sleep.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_connection_error_is_not_retried(
        self, fetcher: ResilientFetcher, mock_client: AsyncMock, sleep: AsyncMock
    ) -> None:
        mock_client.get.side_effect = httpx.ConnectError("Connection refused")

        result = await fetcher.fetch(URL, headers={})

        assert isinstance(result, Failure)
        assert isinstance(result.error, UpstreamUnavailableError)
        assert result.error.code == ErrorCode.UPSTREAM_UNAVAILABLE
        assert mock_client.get.await_count == 1
        sleep.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_failure_after_rate_limit_stops_loop(
        self, fetcher: ResilientFetcher, mock_client: AsyncMock, sleep: AsyncMock
    ) -> None:
        mock_client.get.side_effect = [rate_limited("1"), httpx.Response(500), ok()]

        result = await fetcher.fetch(URL, headers={})

        assert isinstance(result, Failure)
        assert isinstance(result.error, UpstreamUnavailableError)
        assert mock_client.get.await_count == 2
        sleep.assert_awaited_once_with(1.0)


class TestParseRetryAfter:
    """Tests for Retry-After interpretation."""

    @pytest.fixture
    def fetcher(self) -> ResilientFetcher:
        return ResilientFetcher(retry_after_default=7.0)

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("3", 3.0),
            (" 12 ", 12.0),
            ("1.5", 1.5),
            ("0", 0.0),
            (None, 7.0),
            ("", 7.0),
            ("-4", 7.0),
            ("nan", 7.0),
            ("later", 7.0),
        ],
    )
    def test_values(
        self, fetcher: ResilientFetcher, value: str | None, expected: float
    ) -> None:
        assert fetcher.parse_retry_after(value) == expected

    def test_http_date_in_future(self, fetcher: ResilientFetcher) -> None:
        value = format_datetime(datetime.now(UTC) + timedelta(seconds=30), usegmt=True)

        seconds = fetcher.parse_retry_after(value)

        assert 25 <= seconds <= 30

    def test_http_date_in_past_is_zero(self, fetcher: ResilientFetcher) -> None:
        value = format_datetime(datetime.now(UTC) - timedelta(minutes=5), usegmt=True)

        assert fetcher.parse_retry_after(value) == 0.0

    def test_long_delay_is_capped(self, fetcher: ResilientFetcher) -> None:
        assert fetcher.parse_retry_after("86400") == 60.0

    def test_far_http_date_is_capped(self, fetcher: ResilientFetcher) -> None:
        value = format_datetime(datetime.now(UTC) + timedelta(days=2), usegmt=True)

        assert fetcher.parse_retry_after(value) == 60.0
