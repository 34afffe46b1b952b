"""Tests for shared message helpers."""

from __future__ import annotations

from gateway_providers.base.errors import ErrorCode, ProviderError
from gateway_providers.base.models import Message
from gateway_providers.base.utils.messages import error_message, split_system_message


def test_split_without_system():
    msgs = [Message("user", "hi"), Message("assistant", "hello"), Message("user", "more")]
    system, conversation = split_system_message(msgs)
    assert system is None  # nosec B101
    assert conversation == msgs  # nosec B101


def test_split_lifts_first_system_and_keeps_order():
    msgs = [
        Message("system", "Be terse"),
        Message("user", "Q1"),
        Message("assistant", "A1"),
        Message("user", "Q2"),
    ]
    system, conversation = split_system_message(msgs)
    assert system == "Be terse"  # nosec B101
    assert [m.content for m in conversation] == ["Q1", "A1", "Q2"]  # nosec B101


def test_split_relabels_later_system_messages_in_place():
    msgs = [
        Message("system", "first"),
        Message("user", "Q1"),
        Message("system", "second"),
        Message("user", "Q2"),
    ]
    system, conversation = split_system_message(msgs)
    assert system == "first"  # nosec B101
    assert conversation[1] == Message("user", "second")  # nosec B101
    assert len(conversation) == 3  # nosec B101


def test_split_does_not_mutate_input():
    msgs = (Message("system", "s"), Message("user", "u"))
    split_system_message(msgs)
    assert msgs == (Message("system", "s"), Message("user", "u"))  # nosec B101


def test_error_message_prefers_provider_error_message():
    err = ProviderError(code=ErrorCode.AUTH, message="bad key", provider="openai")
    assert error_message(err, "fallback") == "bad key"  # nosec B101


def test_error_message_uses_str_and_fallback():
    assert error_message(RuntimeError("OpenAI down"), "x") == "OpenAI down"  # nosec B101
    assert error_message(RuntimeError(), "Unknown OpenAI error") == "Unknown OpenAI error"  # nosec B101
