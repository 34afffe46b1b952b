from __future__ import annotations

import asyncio
import types

import pytest

from gateway_providers.base.errors import (
    AllProvidersFailedError,
    ErrorCode,
    ProviderError,
    classify_exception,
    is_retryable,
    wrap_provider_exception,
)
from gateway_providers.tests.fakes import StatusError


def test_classify_provider_error_passthrough():
    e = ProviderError(code=ErrorCode.AUTH, message="nope", provider="x")
    assert classify_exception(e) is ErrorCode.AUTH  # nosec B101 - assert is appropriate in unit tests


@pytest.mark.parametrize(
    "status, code",
    [
        (401, ErrorCode.AUTH),
        (404, ErrorCode.NOT_FOUND),
        (429, ErrorCode.RATE_LIMIT),
        (500, ErrorCode.SERVER_ERROR),
        (503, ErrorCode.UNAVAILABLE),
        (529, ErrorCode.UNAVAILABLE),
    ],
)
def test_classify_http_status_mapping(status, code):
    assert classify_exception(StatusError("boom", status)) is code  # nosec B101 - assert is appropriate in unit tests


def test_classify_nested_response_status():
    e = Exception("whatever")
    e.response = types.SimpleNamespace(status_code=504)  # type: ignore[attr-defined]
    assert classify_exception(e) is ErrorCode.TIMEOUT  # nosec B101 - assert is appropriate in unit tests


def test_classify_heuristics():
    assert classify_exception(Exception("rate limit exceeded")) is ErrorCode.RATE_LIMIT  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(Exception("timed out waiting")) is ErrorCode.TIMEOUT  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(Exception("Overloaded")) is ErrorCode.UNAVAILABLE  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(Exception("random")) is ErrorCode.UNKNOWN  # nosec B101 - assert is appropriate in unit tests


def test_classify_timeouts():
    assert classify_exception(TimeoutError()) is ErrorCode.TIMEOUT  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(asyncio.TimeoutError()) is ErrorCode.TIMEOUT  # nosec B101 - assert is appropriate in unit tests


def test_wrap_preserves_message_and_raw():
    original = StatusError("Rate limit exceeded", 429)
    wrapped = wrap_provider_exception(original, provider="openai", model="gpt-4o")
    assert str(wrapped) == "Rate limit exceeded"  # nosec B101 - assert is appropriate in unit tests
    assert wrapped.code is ErrorCode.RATE_LIMIT and wrapped.retryable  # nosec B101 - assert is appropriate in unit tests
    assert wrapped.raw is original and wrapped.provider == "openai"  # nosec B101 - assert is appropriate in unit tests


def test_wrap_returns_provider_error_unchanged():
    e = ProviderError(code=ErrorCode.AUTH, message="bad key", provider="anthropic")
    assert wrap_provider_exception(e, provider="openai") is e  # nosec B101 - assert is appropriate in unit tests


def test_is_retryable():
    assert is_retryable(ErrorCode.RATE_LIMIT)  # nosec B101 - assert is appropriate in unit tests
    assert not is_retryable(ErrorCode.AUTH)  # nosec B101 - assert is appropriate in unit tests


def test_all_providers_failed_error_shape():
    e = AllProvidersFailedError(message="last failure", attempted=["openai"])
    assert str(e) == "last failure"  # nosec B101 - assert is appropriate in unit tests
    assert e.code is ErrorCode.ALL_PROVIDERS_FAILED and e.provider == "router"  # nosec B101 - assert is appropriate in unit tests
    assert isinstance(e, ProviderError)  # nosec B101 - assert is appropriate in unit tests
