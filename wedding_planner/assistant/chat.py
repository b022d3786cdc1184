from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator

from pydantic import BaseModel, Field

from ..llm.config import DEFAULT_LLM_CONFIG, LLMConfig
from ..llm.groq_client import stream

logger = logging.getLogger(__name__)

HISTORY_TURNS = 5
MAX_TOKENS = 3000
TEMPERATURE = 0.7

SYSTEM_PROMPT = """You are an expert AI wedding planning assistant. You help couples plan their perfect wedding by providing personalized advice, recommendations, and guidance. You have extensive knowledge about:

- Wedding budgeting and cost management
- Wedding timelines and planning schedules
- Global wedding venues and vendors
- Wedding traditions from various cultures and religions
- Wedding attire and fashion advice
- Catering and menu planning
- Photography and videography
- Flowers and decorations
- Music and entertainment
- Legal requirements for marriages worldwide
- Wedding etiquette and protocols

Always provide helpful, accurate, and practical advice. Be warm, encouraging, and supportive. If you don't know something specific, acknowledge it and suggest ways the couple can find the information they need.

Provide global wedding advice and adapt recommendations based on the couple's location when mentioned."""


class ConversationTurn(BaseModel):
    type: str = Field(..., description='"user" or "assistant"')
    content: str


class AssistantRequest(BaseModel):
    message: str = Field(..., min_length=1)
    conversation: list[ConversationTurn] = Field(default_factory=list)


def build_messages(request: AssistantRequest) -> list[dict[str, str]]:
    """System prompt, the last few turns of history, then the new message."""
    history = [
        {"role": "user" if turn.type == "user" else "assistant", "content": turn.content}
        for turn in request.conversation[-HISTORY_TURNS:]
    ]
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        *history,
        {"role": "user", "content": request.message},
    ]


def open_stream(request: AssistantRequest, config: LLMConfig = DEFAULT_LLM_CONFIG) -> Iterator[str]:
    return stream(build_messages(request), config, max_tokens=MAX_TOKENS, temperature=TEMPERATURE)


def sse_events(deltas: Iterable[str]) -> Iterator[str]:
    """Wrap text deltas as server-sent events in the chat-completions chunk shape."""
    try:
        for delta in deltas:
            if delta:
                payload = {"choices": [{"delta": {"content": delta}}]}
                yield f"data: {json.dumps(payload)}\n\n"
    except Exception:
        logger.warning("Assistant stream broke off early", exc_info=True)
    yield "data: [DONE]\n\n"
