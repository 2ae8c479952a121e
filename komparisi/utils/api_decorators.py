"""
Error classification and retry decorators for calls to the vision API.

Main components:
- ErrorType: categories of API errors
- classify_error: maps an exception to an ErrorType and a user-facing message
- with_async_retry_backoff: retries an async call with exponential backoff

Usage:
   ```python
   @with_async_retry_backoff(max_retries=3, initial_backoff=1.0)
   async def call_api_async(data):
       async with aiohttp.ClientSession() as session:
           async with session.post('https://api.example.com', json=data) as response:
               response.raise_for_status()
               return await response.json()
   ```
"""

import asyncio
import functools
import logging
import uuid
from typing import Any, Callable, Optional, Tuple, Type


class ErrorType:
    TIMEOUT = "timeout"
    RATE_LIMIT = "rate_limit"
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    SERVER = "server"
    CLIENT = "client"
    NETWORK = "network"
    UNKNOWN = "unknown"


# Never worth retrying: the same request fails the same way
NON_RETRYABLE = (ErrorType.VALIDATION, ErrorType.AUTHENTICATION, ErrorType.CLIENT)


def classify_error(error: Exception) -> Tuple[str, str]:
    """
    Classify an API error for handling.

    Args:
        error: The exception to classify

    Returns:
        tuple: (error_type, user_friendly_message)
    """
    if isinstance(error, asyncio.TimeoutError):
        return (
            ErrorType.TIMEOUT,
            "Layanan tidak merespons tepat waktu. Silakan coba lagi.",
        )

    error_str = str(error).lower()

    if "timeout" in error_str or "timed out" in error_str:
        return (
            ErrorType.TIMEOUT,
            "Layanan tidak merespons tepat waktu. Silakan coba lagi.",
        )

    if any(x in error_str for x in ["rate limit", "ratelimit", "too many requests", "429"]):
        return (
            ErrorType.RATE_LIMIT,
            "Layanan sedang sibuk. Silakan coba lagi dalam satu menit.",
        )

    if any(x in error_str for x in ["authentication", "unauthorized", "api key", "401"]):
        return (
            ErrorType.AUTHENTICATION,
            "Otorisasi API gagal. Silakan hubungi pengembang.",
        )

    if any(x in error_str for x in ["validation", "invalid", "schema", "400"]):
        return (
            ErrorType.VALIDATION,
            "Format data tidak valid. Periksa kembali gambar KTP.",
        )

    if any(x in error_str for x in ["server error", "500", "502", "503", "504"]):
        return (
            ErrorType.SERVER,
            "Terjadi kesalahan pada server. Silakan coba beberapa saat lagi.",
        )

    if any(x in error_str for x in ["client error", "bad request"]):
        return (
            ErrorType.CLIENT,
            "Permintaan tidak valid. Coba gambar atau format lain.",
        )

    if any(x in error_str for x in ["network", "connection", "connect", "unreachable"]):
        return (
            ErrorType.NETWORK,
            "Masalah koneksi jaringan. Periksa sambungan Anda.",
        )

    return (ErrorType.UNKNOWN, "Terjadi kesalahan yang tidak diketahui. Silakan coba lagi.")


def with_async_retry_backoff(
    max_retries: int = 3,
    initial_backoff: float = 1.0,
    backoff_factor: float = 2.0,
    error_types: Optional[list] = None,
    wrap_error: Type[Exception] = RuntimeError,
) -> Callable:
    """
    Decorator for async functions adding retries with exponential backoff.

    Timeouts are re-raised unchanged after the last attempt; any other final
    error is raised as wrap_error carrying the friendly message.

    Args:
        max_retries: Maximum number of retries
        initial_backoff: First delay in seconds
        backoff_factor: Multiplier for each further delay
        error_types: Error types to retry (None for all retryable types)
        wrap_error: Exception class raised after the last failed attempt

    Returns:
        Decorated async function
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> Any:
            req_id = kwargs.get("req_id") or uuid.uuid4().hex[:8]
            logger = logging.getLogger(func.__module__)

            retries = 0
            while True:
                try:
                    if retries > 0:
                        logger.info(f"[{req_id}] Retry {retries}/{max_retries} for {func.__name__}")
                    return await func(*args, **kwargs)

                except Exception as e:
                    error_class, friendly_msg = classify_error(e)
                    current_backoff = initial_backoff * (backoff_factor**retries)

                    can_retry = error_types is None or error_class in error_types
                    if error_class in NON_RETRYABLE:
                        can_retry = False

                    if can_retry and retries < max_retries:
                        logger.warning(
                            f"[{req_id}] {error_class} error in {func.__name__}: {str(e)}. "
                            f"Retrying in {current_backoff:.1f}s ({retries+1}/{max_retries})"
                        )
                        await asyncio.sleep(current_backoff)
                        retries += 1
                        continue

                    if retries > 0:
                        logger.error(
                            f"[{req_id}] {error_class} error in {func.__name__} after {retries} retries: {str(e)}"
                        )
                    else:
                        logger.error(f"[{req_id}] {error_class} error in {func.__name__}: {str(e)}")

                    if isinstance(e, asyncio.TimeoutError):
                        raise
                    wrapped = wrap_error(str(e))
                    wrapped.friendly_message = getattr(e, "friendly_message", friendly_msg)
                    raise wrapped from e

        return wrapper

    return decorator
