from __future__ import annotations

import pytest

from gateway_providers.base.models import CompletionResult, TokenUsage
from gateway_providers.base.routing import ProviderRouter
from gateway_providers.base.utils.simple import simple
from gateway_providers.tests.fakes import ScriptedAdapter


def _result(provider: str) -> CompletionResult:
    return CompletionResult(content="ok", tokens_used=TokenUsage(1, 1), model="m", provider=provider)


@pytest.mark.asyncio
async def test_simple_builds_single_user_request():
    adapter = ScriptedAdapter("openai", result=_result("openai"))
    out = await simple(adapter, "Hello", model="  gpt-4o-mini ", max_tokens=20)
    assert out.content == "ok"  # nosec B101
    (req,) = adapter.complete_calls
    assert [m.role for m in req.messages] == ["user"]  # nosec B101
    assert req.model == "gpt-4o-mini" and req.max_tokens == 20  # nosec B101


@pytest.mark.asyncio
async def test_simple_with_system_message_and_blank_model():
    adapter = ScriptedAdapter("anthropic", result=_result("anthropic"))
    await simple(adapter, "Hi", system="Be terse", model="   ")
    (req,) = adapter.complete_calls
    assert [m.role for m in req.messages] == ["system", "user"]  # nosec B101
    assert req.model is None  # nosec B101


@pytest.mark.asyncio
async def test_simple_accepts_router():
    router = ProviderRouter(
        [ScriptedAdapter("openai", configured=False), ScriptedAdapter("anthropic", result=_result("anthropic"))]
    )
    out = await simple(router, "Hello")
    assert out.provider == "anthropic"  # nosec B101


@pytest.mark.asyncio
@pytest.mark.parametrize("text", ["", "   "])
async def test_simple_rejects_blank_prompt(text):
    with pytest.raises(ValueError):
        await simple(ScriptedAdapter("openai"), text)
