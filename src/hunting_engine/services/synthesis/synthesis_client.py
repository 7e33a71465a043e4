"""
Generative synthesis collaborator.

A single blocking chat-completion call: system instruction + user instruction
in, raw text out. No retries, no streaming. Failures are raised as
ExternalServiceError so the orchestration step that called it aborts.
"""
from __future__ import annotations

import time
from typing import Any, List, Optional

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage

from hunting_engine.common.logging_utils import get_logger
from hunting_engine.errors import ExternalServiceError
from hunting_engine.infrastructure.llm.base_models import (
    DEFAULT_MAX_OUTPUT_TOKENS,
    get_synthesis_model,
)

logger = get_logger(__name__)


def message_text(message: Any) -> str:
    """
    Extract text content from a chat model response.

    Content can be a plain string or a list of content blocks
    (responses API / multimodal); text blocks are concatenated.
    """
    content = getattr(message, "content", message)
    if content is None:
        return ""
    if isinstance(content, str):
        return content

    text_parts: List[str] = []
    for block in content:
        if isinstance(block, str):
            text_parts.append(block)
        elif isinstance(block, dict):
            if block.get("type") in ("text", "output_text"):
                text_parts.append(block.get("text", ""))
        elif getattr(block, "type", None) == "text":
            text_parts.append(getattr(block, "text", ""))
    return "".join(text_parts)


class SynthesisClient:
    def __init__(self, model: Optional[BaseChatModel] = None):
        self._model = model

    @property
    def model(self) -> BaseChatModel:
        if self._model is None:
            self._model = get_synthesis_model()
        return self._model

    async def complete(
        self,
        system_instruction: str,
        user_instruction: str,
        max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS,
    ) -> str:
        messages: List[BaseMessage] = [
            SystemMessage(content=system_instruction),
            HumanMessage(content=user_instruction),
        ]

        start = time.monotonic()
        try:
            # self.model may build the client here (missing credentials surface as failures)
            response = await self.model.bind(max_tokens=max_output_tokens).ainvoke(messages)
        except Exception as e:
            logger.error("[synthesis] Completion call failed: %s", e)
            raise ExternalServiceError(f"Synthesis call failed: {e}") from e

        text = message_text(response)
        logger.info(
            "[synthesis] Completion received (%d chars) in %.1fs",
            len(text),
            time.monotonic() - start,
        )
        return text
