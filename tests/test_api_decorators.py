"""
Tests for komparisi/utils/api_decorators.py
"""

import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from komparisi.utils.api_decorators import ErrorType, classify_error, with_async_retry_backoff


class FlakyError(Exception):
    pass


@pytest.fixture
def no_sleep():
    with patch("komparisi.utils.api_decorators.asyncio.sleep", new=AsyncMock()) as sleep:
        yield sleep


class TestClassifyError:
    @pytest.mark.parametrize(
        "error, expected",
        [
            (asyncio.TimeoutError(), ErrorType.TIMEOUT),
            (Exception("Request timed out"), ErrorType.TIMEOUT),
            (Exception("429 Too Many Requests"), ErrorType.RATE_LIMIT),
            (Exception("Vision API returned error: 401"), ErrorType.AUTHENTICATION),
            (Exception("Invalid JSON in function arguments"), ErrorType.VALIDATION),
            (Exception("Vision API returned error: 503"), ErrorType.SERVER),
            (Exception("Bad request"), ErrorType.CLIENT),
            (Exception("Network connection error: refused"), ErrorType.NETWORK),
            (Exception("something odd"), ErrorType.UNKNOWN),
        ],
    )
    def test_classification(self, error, expected):
        error_type, message = classify_error(error)
        assert error_type == expected
        assert message

    def test_friendly_message_is_indonesian(self):
        _, message = classify_error(asyncio.TimeoutError())
        assert "Silakan coba lagi" in message


class TestRetryBackoff:
    @pytest.mark.asyncio
    async def test_success_without_retry(self, no_sleep):
        func = AsyncMock(return_value="ok")
        wrapped = with_async_retry_backoff(max_retries=2)(func)

        assert await wrapped(req_id="r1") == "ok"
        func.assert_awaited_once_with(req_id="r1")
        no_sleep.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_retries_with_exponential_backoff(self, no_sleep):
        func = AsyncMock(
            side_effect=[FlakyError("server error 502"), FlakyError("server error 502"), "ok"]
        )
        func.__name__ = "call"
        wrapped = with_async_retry_backoff(max_retries=3, initial_backoff=1.0, backoff_factor=2.0)(
            func
        )

        assert await wrapped() == "ok"
        assert func.await_count == 3
        assert [c.args[0] for c in no_sleep.await_args_list] == [1.0, 2.0]

    @pytest.mark.asyncio
    async def test_non_retryable_error_is_wrapped(self, no_sleep):
        func = AsyncMock(side_effect=FlakyError("401 unauthorized"))
        func.__name__ = "call"
        wrapped = with_async_retry_backoff(max_retries=3, wrap_error=ValueError)(func)

        with pytest.raises(ValueError) as exc_info:
            await wrapped()

        assert func.await_count == 1
        assert isinstance(exc_info.value.__cause__, FlakyError)
        assert exc_info.value.friendly_message.startswith("Otorisasi API gagal")

    @pytest.mark.asyncio
    async def test_timeout_reraised_after_last_attempt(self, no_sleep):
        func = AsyncMock(side_effect=asyncio.TimeoutError())
        func.__name__ = "call"
        wrapped = with_async_retry_backoff(max_retries=1)(func)

        with pytest.raises(asyncio.TimeoutError):
            await wrapped()
        assert func.await_count == 2

    @pytest.mark.asyncio
    async def test_error_types_limit_retries(self, no_sleep):
        func = AsyncMock(side_effect=FlakyError("server error 500"))
        func.__name__ = "call"
        wrapped = with_async_retry_backoff(max_retries=3, error_types=[ErrorType.NETWORK])(func)

        with pytest.raises(RuntimeError):
            await wrapped()
        assert func.await_count == 1
