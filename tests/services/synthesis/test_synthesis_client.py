"""
Tests for the synthesis collaborator.
"""
import pytest
from unittest.mock import AsyncMock, MagicMock

from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from hunting_engine.errors import ExternalServiceError
from hunting_engine.services.synthesis.synthesis_client import SynthesisClient, message_text


def test_message_text_plain_string():
    assert message_text(AIMessage(content="hello")) == "hello"


def test_message_text_content_blocks():
    message = AIMessage(
        content=[
            {"type": "text", "text": "part one, "},
            {"type": "reasoning", "text": "hidden"},
            {"type": "output_text", "text": "part two"},
        ]
    )

    assert message_text(message) == "part one, part two"


@pytest.mark.asyncio
async def test_complete_returns_model_text():
    client = SynthesisClient(model=FakeListChatModel(responses=['```json\n{"accounts": []}\n```']))

    text = await client.complete("system", "user")

    assert text == '```json\n{"accounts": []}\n```'


@pytest.mark.asyncio
async def test_complete_sends_system_and_user_messages_with_token_cap():
    bound = MagicMock()
    bound.ainvoke = AsyncMock(return_value=AIMessage(content="ok"))
    model = MagicMock()
    model.bind.return_value = bound

    await SynthesisClient(model=model).complete("be brief", "list accounts", max_output_tokens=1234)

    model.bind.assert_called_once_with(max_tokens=1234)
    messages = bound.ainvoke.await_args.args[0]
    assert isinstance(messages[0], SystemMessage)
    assert messages[0].content == "be brief"
    assert isinstance(messages[1], HumanMessage)
    assert messages[1].content == "list accounts"


@pytest.mark.asyncio
async def test_complete_wraps_failures():
    bound = MagicMock()
    bound.ainvoke = AsyncMock(side_effect=ConnectionError("connection reset"))
    model = MagicMock()
    model.bind.return_value = bound

    with pytest.raises(ExternalServiceError) as exc_info:
        await SynthesisClient(model=model).complete("s", "u")

    assert isinstance(exc_info.value.__cause__, ConnectionError)
    assert "connection reset" in exc_info.value.message
