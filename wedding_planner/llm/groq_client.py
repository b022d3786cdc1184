from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from groq import Groq

from .config import DEFAULT_LLM_CONFIG, LLMConfig

logger = logging.getLogger(__name__)


def get_client(config: LLMConfig = DEFAULT_LLM_CONFIG) -> Groq:
    return Groq(api_key=config.api_key, timeout=config.timeout)


def complete(
    messages: list[dict[str, str]],
    config: LLMConfig = DEFAULT_LLM_CONFIG,
    *,
    max_tokens: int | None = None,
    temperature: float = 0.3,
    json_mode: bool = False,
) -> str:
    """
    Run a single (non-streaming) chat completion and return the reply text.

    Raises whatever the Groq SDK raises; callers decide how to degrade.
    """
    kwargs: dict[str, Any] = {
        "model": config.model,
        "messages": messages,
        "max_tokens": max_tokens or config.max_tokens,
        "temperature": temperature,
    }
    if json_mode:
        kwargs["response_format"] = {"type": "json_object"}

    client = get_client(config)
    response = client.chat.completions.create(**kwargs)
    content = response.choices[0].message.content or ""
    logger.debug("Groq completion returned %d chars", len(content))
    return content


def stream(
    messages: list[dict[str, str]],
    config: LLMConfig = DEFAULT_LLM_CONFIG,
    *,
    max_tokens: int | None = None,
    temperature: float = 0.7,
) -> Iterator[str]:
    """
    Start a streaming chat completion and return an iterator of text deltas.

    The request is sent before this returns, so connection and auth errors
    surface here rather than midway through the iteration.
    """
    client = get_client(config)
    response = client.chat.completions.create(
        model=config.model,
        messages=messages,
        max_tokens=max_tokens or config.max_tokens,
        temperature=temperature,
        stream=True,
    )
    return (chunk.choices[0].delta.content or "" for chunk in response if chunk.choices)
