"""Tests for the Anthropic adapter against a fake async SDK client.

Covers parameter building and defaults, text extraction, usage mapping, error
propagation, stream translation, the terminal error chunk, and client caching.
"""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from gateway_providers.anthropic import AnthropicProvider
from gateway_providers.anthropic.stream_helpers import translate_stream_event
from gateway_providers.base.cancellation import CancellationToken, CancelledError
from gateway_providers.base.errors import ErrorCode, ProviderError
from gateway_providers.base.interfaces import HasDefaultModel, ProviderAdapter
from gateway_providers.base.models import CompletionRequest, Message, TokenUsage
from gateway_providers.base.streaming import ContentChunk, DoneChunk, ErrorChunk
from gateway_providers.tests.fakes import (
    FakeAnthropicClient,
    FakeAnthropicStream,
    StatusError,
    anthropic_response,
    text_block,
    text_delta,
)


def _request(**kwargs) -> CompletionRequest:
    return CompletionRequest(
        messages=(Message("system", "You are helpful."), Message("user", "Hello")),
        **kwargs,
    )


async def _collect(agen):
    return [chunk async for chunk in agen]


class TestConfiguration:
    """Credential handling and protocol conformance."""

    def test_reads_key_from_environment(self, monkeypatch):
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant-test")
        assert AnthropicProvider().is_configured()  # nosec B101

    def test_missing_key_is_not_configured(self, no_provider_env):
        adapter = AnthropicProvider()
        assert adapter.is_configured() is False  # nosec B101

    def test_explicit_key_wins(self, no_provider_env):
        assert AnthropicProvider(api_key="k").is_configured()  # nosec B101

    def test_satisfies_protocols(self):
        adapter = AnthropicProvider(api_key="k")
        assert isinstance(adapter, ProviderAdapter)  # nosec B101
        assert isinstance(adapter, HasDefaultModel)  # nosec B101
        assert adapter.provider_name == "anthropic"  # nosec B101
        assert adapter.default_model() == "claude-3-5-sonnet-20241022"  # nosec B101

    def test_client_created_once(self, monkeypatch):
        created = []

        def _factory(**kwargs):
            created.append(kwargs)
            return SimpleNamespace()

        monkeypatch.setattr("gateway_providers.anthropic.client.anthropic.AsyncAnthropic", _factory)
        adapter = AnthropicProvider(api_key="k", timeout=5.0, max_retries=1)
        first = adapter._create_client()
        second = adapter._create_client()
        assert first is second  # nosec B101
        assert created == [{"api_key": "k", "timeout": 5.0, "max_retries": 1}]  # nosec B101


class TestComplete:
    """Non-streaming completion."""

    @pytest.mark.asyncio
    async def test_defaults_and_system_split(self):
        client = FakeAnthropicClient(response=anthropic_response([text_block("Hi there")]))
        adapter = AnthropicProvider(api_key="k", client=client)

        result = await adapter.complete(_request())

        params = client.create_calls[0]
        assert params["model"] == "claude-3-5-sonnet-20241022"  # nosec B101
        assert params["max_tokens"] == 1000  # nosec B101
        assert params["system"] == "You are helpful."  # nosec B101
        assert params["messages"] == [{"role": "user", "content": "Hello"}]  # nosec B101
        assert "temperature" not in params  # nosec B101
        assert result.content == "Hi there"  # nosec B101
        assert result.provider == "anthropic"  # nosec B101
        assert result.model == "claude-3-5-sonnet-20241022"  # nosec B101

    @pytest.mark.asyncio
    async def test_overrides_forwarded_and_system_omitted(self):
        client = FakeAnthropicClient(response=anthropic_response([text_block("ok")]))
        adapter = AnthropicProvider(api_key="k", client=client)
        req = CompletionRequest(
            messages=(Message("user", "Hello"),),
            model="claude-3-opus-20240229",
            max_tokens=64,
            temperature=0.2,
        )

        await adapter.complete(req)

        params = client.create_calls[0]
        assert params["model"] == "claude-3-opus-20240229"  # nosec B101
        assert params["max_tokens"] == 64  # nosec B101
        assert params["temperature"] == 0.2  # nosec B101
        assert "system" not in params  # nosec B101

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "blocks",
        [
            [text_block("answer")],
            [SimpleNamespace(type="thinking", thinking="hmm"), text_block("answer")],
            [
                SimpleNamespace(type="tool_use", id="t1", name="x", input={}),
                text_block("answer"),
                SimpleNamespace(type="thinking", thinking="after"),
            ],
        ],
    )
    async def test_first_text_block_wins(self, blocks):
        client = FakeAnthropicClient(response=anthropic_response(blocks))
        result = await AnthropicProvider(api_key="k", client=client).complete(_request())
        assert result.content == "answer"  # nosec B101

    @pytest.mark.asyncio
    async def test_no_text_block_fails(self):
        client = FakeAnthropicClient(
            response=anthropic_response([SimpleNamespace(type="tool_use", id="t", name="n", input={})])
        )
        with pytest.raises(ProviderError) as info:
            await AnthropicProvider(api_key="k", client=client).complete(_request())
        assert info.value.code is ErrorCode.NO_TEXT_CONTENT  # nosec B101
        assert str(info.value) == "No text response from Anthropic"  # nosec B101

    @pytest.mark.asyncio
    async def test_usage_mapping(self):
        client = FakeAnthropicClient(
            response=anthropic_response([text_block("x")], input_tokens=21, output_tokens=8)
        )
        result = await AnthropicProvider(api_key="k", client=client).complete(_request())
        assert result.tokens_used == TokenUsage(prompt=21, completion=8)  # nosec B101
        assert result.tokens_used.total == 29  # nosec B101

    @pytest.mark.asyncio
    async def test_vendor_error_message_preserved(self, log_events):
        boom = StatusError("invalid x-api-key", 401)
        client = FakeAnthropicClient(error=boom)
        with pytest.raises(ProviderError) as info:
            await AnthropicProvider(api_key="k", client=client).complete(_request())
        assert info.value.message == "invalid x-api-key"  # nosec B101
        assert info.value.code is ErrorCode.AUTH  # nosec B101
        assert info.value.__cause__ is boom  # nosec B101
        assert log_events.named("complete.error")[0]["error_code"] == "auth"  # nosec B101

    @pytest.mark.asyncio
    async def test_unconfigured_complete_raises_without_call(self, no_provider_env):
        client = FakeAnthropicClient(response=anthropic_response([text_block("x")]))
        with pytest.raises(ProviderError) as info:
            await AnthropicProvider(client=client).complete(_request())
        assert info.value.code is ErrorCode.NOT_CONFIGURED  # nosec B101
        assert client.create_calls == []  # nosec B101

    @pytest.mark.asyncio
    async def test_cancelled_before_call(self):
        client = FakeAnthropicClient(response=anthropic_response([text_block("x")]))
        token = CancellationToken()
        token.cancel("client gone")
        with pytest.raises(CancelledError):
            await AnthropicProvider(api_key="k", client=client).complete(_request(), cancel=token)
        assert client.create_calls == []  # nosec B101

    @pytest.mark.asyncio
    async def test_logs_start_and_end(self, log_events):
        client = FakeAnthropicClient(response=anthropic_response([text_block("x")]))
        await AnthropicProvider(api_key="k", client=client).complete(_request())
        assert log_events.named("complete.start")  # nosec B101
        end = log_events.named("complete.end")[0]
        assert end["provider"] == "anthropic"  # nosec B101
        assert end["tokens"] == {"prompt": 12, "completion": 7, "total": 19}  # nosec B101


class TestStream:
    """Streaming translation."""

    def test_translate_ignores_non_text_events(self):
        assert translate_stream_event(SimpleNamespace(type="message_start")) is None  # nosec B101
        assert translate_stream_event(SimpleNamespace(type="content_block_start")) is None  # nosec B101
        assert translate_stream_event(  # nosec B101
            SimpleNamespace(
                type="content_block_delta",
                delta=SimpleNamespace(type="input_json_delta", partial_json="{"),
            )
        ) is None
        assert translate_stream_event(text_delta("hi")) == ContentChunk("hi")  # nosec B101

    @pytest.mark.asyncio
    async def test_stream_success(self):
        events = [
            SimpleNamespace(type="message_start"),
            SimpleNamespace(type="content_block_start", index=0),
            text_delta("Hel"),
            text_delta("lo"),
            SimpleNamespace(type="content_block_stop", index=0),
            SimpleNamespace(type="message_delta", usage=SimpleNamespace(output_tokens=2)),
            SimpleNamespace(type="message_stop"),
        ]
        stream = FakeAnthropicStream(
            events, anthropic_response([text_block("Hello")], input_tokens=10, output_tokens=2)
        )
        client = FakeAnthropicClient(stream=stream)
        adapter = AnthropicProvider(api_key="k", client=client)

        chunks = await _collect(adapter.stream(_request()))

        assert chunks == [  # nosec B101
            ContentChunk("Hel"),
            ContentChunk("lo"),
            DoneChunk(TokenUsage(prompt=0, completion=2)),
            DoneChunk(TokenUsage(prompt=10, completion=2)),
        ]
        assert stream.entered and stream.exited  # nosec B101
        params = client.stream_calls[0]
        assert params["system"] == "You are helpful."  # nosec B101
        assert params["max_tokens"] == 1000  # nosec B101
        assert params["model"] == "claude-3-5-sonnet-20241022"  # nosec B101

    @pytest.mark.asyncio
    async def test_stream_error_mid_iteration(self):
        stream = FakeAnthropicStream(
            [text_delta("part")], error=StatusError("Overloaded", 529), error_after=None
        )
        adapter = AnthropicProvider(api_key="k", client=FakeAnthropicClient(stream=stream))

        chunks = await _collect(adapter.stream(_request()))

        assert chunks == [ContentChunk("part"), ErrorChunk("Overloaded")]  # nosec B101
        assert stream.exited  # nosec B101

    @pytest.mark.asyncio
    async def test_stream_construction_error(self):
        client = FakeAnthropicClient(stream_error=RuntimeError("connect failed"))
        chunks = await _collect(AnthropicProvider(api_key="k", client=client).stream(_request()))
        assert chunks == [ErrorChunk("connect failed")]  # nosec B101

    @pytest.mark.asyncio
    async def test_stream_error_without_message_uses_fallback_text(self):
        client = FakeAnthropicClient(stream_error=RuntimeError())
        chunks = await _collect(AnthropicProvider(api_key="k", client=client).stream(_request()))
        assert chunks == [ErrorChunk("Unknown Anthropic error")]  # nosec B101

    @pytest.mark.asyncio
    async def test_cancel_between_events_closes_stream(self):
        token = CancellationToken()
        stream = FakeAnthropicStream([text_delta("a"), text_delta("b")], anthropic_response([]))
        adapter = AnthropicProvider(api_key="k", client=FakeAnthropicClient(stream=stream))
        received = []
        with pytest.raises(CancelledError):
            async for chunk in adapter.stream(_request(), cancel=token):
                received.append(chunk)
                token.cancel("stop")
        assert received == [ContentChunk("a")]  # nosec B101
        assert stream.exited  # nosec B101

    @pytest.mark.asyncio
    async def test_unconfigured_stream_yields_error(self, no_provider_env):
        chunks = await _collect(AnthropicProvider().stream(_request()))
        assert len(chunks) == 1 and isinstance(chunks[0], ErrorChunk)  # nosec B101
