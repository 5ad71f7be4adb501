import httpx
import openai
import pytest

from script_ai_core.domain_models import ErrorCategory
from script_ai_core.errors import USER_MESSAGES, classify_delegate_error


class StatusError(Exception):
    def __init__(self, message, status_code=None, code=None):
        super().__init__(message)
        self.status_code = status_code
        self.code = code


class BrokenStr(Exception):
    def __str__(self):
        raise ValueError("boom")


@pytest.mark.parametrize(
    "exc, expected",
    [
        (Exception("got status 429 from upstream"), ErrorCategory.QUOTA_EXCEEDED),
        (Exception("RESOURCE_EXHAUSTED: quota"), ErrorCategory.QUOTA_EXCEEDED),
        (StatusError("Too many requests", status_code=429), ErrorCategory.QUOTA_EXCEEDED),
        (StatusError("You exceeded your quota", code="insufficient_quota"), ErrorCategory.QUOTA_EXCEEDED),
        (Exception("503 Service Unavailable"), ErrorCategory.SERVICE_UNAVAILABLE),
        (StatusError("Internal error", status_code=500), ErrorCategory.SERVICE_UNAVAILABLE),
        (Exception("The model is overloaded"), ErrorCategory.SERVICE_UNAVAILABLE),
        (Exception("getaddrinfo ENOTFOUND api.openai.com"), ErrorCategory.UNKNOWN),
        (ValueError("anything else"), ErrorCategory.UNKNOWN),
    ],
)
def test_classify_delegate_error(exc, expected):
    classified = classify_delegate_error(exc)
    assert classified.category is expected
    assert classified.message == USER_MESSAGES[expected]


def test_quota_takes_priority_over_service_signal():
    exc = Exception("429 after 503 retry")
    assert classify_delegate_error(exc).category is ErrorCategory.QUOTA_EXCEEDED


def test_explicit_status_code_decides_before_message():
    exc = StatusError("upstream said 429 earlier", status_code=503)
    assert classify_delegate_error(exc).category is ErrorCategory.SERVICE_UNAVAILABLE


@pytest.mark.parametrize(
    "message",
    [
        "This model's maximum context length is 128000 tokens. However, your messages resulted in 150029 tokens.",
        "Invalid file: document has 14290 pages",
        "request id req_5003 failed validation",
    ],
)
def test_numbers_containing_status_digits_are_not_signals(message):
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    exc = openai.BadRequestError(message, response=httpx.Response(400, request=request), body=None)

    classified = classify_delegate_error(exc)
    assert classified.category is ErrorCategory.UNKNOWN
    assert classified.message == USER_MESSAGES[ErrorCategory.UNKNOWN]


def test_classify_never_raises():
    classified = classify_delegate_error(BrokenStr())
    assert classified.category is ErrorCategory.UNKNOWN
    assert classified.message


def test_classify_openai_sdk_errors():
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")

    rate_limited = openai.RateLimitError(
        "Rate limit reached", response=httpx.Response(429, request=request), body=None
    )
    unavailable = openai.InternalServerError(
        "Service unavailable", response=httpx.Response(503, request=request), body=None
    )
    connection = openai.APIConnectionError(request=request)

    assert classify_delegate_error(rate_limited).category is ErrorCategory.QUOTA_EXCEEDED
    assert classify_delegate_error(unavailable).category is ErrorCategory.SERVICE_UNAVAILABLE
    assert classify_delegate_error(connection).category is ErrorCategory.UNKNOWN


def test_quota_message_mentions_waiting_and_billing():
    message = USER_MESSAGES[ErrorCategory.QUOTA_EXCEEDED]
    assert "Kuota" in message
    assert "tagihan" in message
