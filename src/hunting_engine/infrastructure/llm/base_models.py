from __future__ import annotations

from functools import lru_cache

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_openai import ChatOpenAI

from hunting_engine.config import HUNTING_LLM_MODEL, HUNTING_LLM_TEMPERATURE


# Output token cap for every hunt / playbook synthesis call.
DEFAULT_MAX_OUTPUT_TOKENS = 4000


@lru_cache(maxsize=1)
def get_synthesis_model() -> BaseChatModel:
    """
    Chat model behind the generative synthesis collaborator.

    Built on first use so importing the package does not require
    OPENAI_API_KEY. No retries: a failed call fails the request.
    """
    return ChatOpenAI(
        model=HUNTING_LLM_MODEL,
        temperature=HUNTING_LLM_TEMPERATURE,
        max_retries=0,
    )
