import json
from datetime import datetime
from unittest.mock import MagicMock, patch

from wedding_planner.llm.config import LLMConfig
from wedding_planner.llm.groq_client import complete, stream
from wedding_planner.recommendations.ai import ai_recommendations, generate_recommendations
from wedding_planner.recommendations.models import WeddingPreferences

ENABLED_CONFIG = LLMConfig(api_key="test-key", enabled=True)
DISABLED_CONFIG = LLMConfig(api_key="test-key", enabled=False)

SAMPLE_PREFERENCES = WeddingPreferences(
    location="Edinburgh",
    budget=25000,
    guest_count="100-150",
    wedding_date=datetime(2026, 6, 20),
    cultural_traditions=["Scottish"],
    style="Vintage",
)

AI_REPLY = json.dumps({
    "recommendations": [
        {
            "priority": "high",
            "category": "venue",
            "title": "Book a castle venue",
            "description": "Edinburgh castles book out early.",
            "reasoning": "Peak summer dates are scarce.",
            "actionable_steps": ["Shortlist three castles"],
            "estimated_cost": "£8,000 - £12,000",
            "timeframe": "Now",
        },
        {
            "priority": "medium",
            "category": "music",
            "title": "Hire a ceilidh band",
            "description": "A Scottish tradition for the reception.",
            "reasoning": "Fits the cultural brief.",
        },
    ]
})


def _mock_groq_response(content: str) -> MagicMock:
    message = MagicMock()
    message.content = content
    choice = MagicMock()
    choice.message = message
    response = MagicMock()
    response.choices = [choice]
    return response


def _chunk(text):
    choice = MagicMock()
    choice.delta.content = text
    chunk = MagicMock()
    chunk.choices = [choice]
    return chunk


# ── Groq client ──────────────────────────────────────────────────────────


@patch("wedding_planner.llm.groq_client.Groq")
def test_complete_passes_options(mock_groq_cls):
    mock_groq_cls.return_value.chat.completions.create.return_value = _mock_groq_response("hi")

    result = complete([{"role": "user", "content": "hello"}], ENABLED_CONFIG, max_tokens=50, json_mode=True)

    assert result == "hi"
    mock_groq_cls.assert_called_once_with(api_key="test-key", timeout=10.0)
    kwargs = mock_groq_cls.return_value.chat.completions.create.call_args.kwargs
    assert kwargs["model"] == "llama-3.3-70b-versatile"
    assert kwargs["max_tokens"] == 50
    assert kwargs["response_format"] == {"type": "json_object"}


@patch("wedding_planner.llm.groq_client.Groq")
def test_complete_none_content_is_empty_string(mock_groq_cls):
    mock_groq_cls.return_value.chat.completions.create.return_value = _mock_groq_response(None)
    assert complete([{"role": "user", "content": "x"}], ENABLED_CONFIG) == ""


@patch("wedding_planner.llm.groq_client.Groq")
def test_stream_yields_deltas(mock_groq_cls):
    mock_groq_cls.return_value.chat.completions.create.return_value = iter(
        [_chunk("Hello"), _chunk(None), _chunk(" there")]
    )

    deltas = list(stream([{"role": "user", "content": "x"}], ENABLED_CONFIG, max_tokens=3000))

    assert deltas == ["Hello", "", " there"]
    assert mock_groq_cls.return_value.chat.completions.create.call_args.kwargs["stream"] is True


# ── AI recommendations ───────────────────────────────────────────────────


@patch("wedding_planner.llm.groq_client.Groq")
def test_ai_recommendations_parsed(mock_groq_cls):
    mock_groq_cls.return_value.chat.completions.create.return_value = _mock_groq_response(AI_REPLY)

    recs, source = generate_recommendations(SAMPLE_PREFERENCES, ENABLED_CONFIG)

    assert source == "ai"
    assert [r.title for r in recs] == ["Book a castle venue", "Hire a ceilidh band"]
    assert recs[1].actionable_steps == []
    prompt = mock_groq_cls.return_value.chat.completions.create.call_args.kwargs["messages"][1]["content"]
    assert "Edinburgh" in prompt
    assert "£25,000" in prompt
    assert "Scottish" in prompt


@patch("wedding_planner.llm.groq_client.Groq")
def test_ai_recommendations_bad_json_falls_back(mock_groq_cls):
    mock_groq_cls.return_value.chat.completions.create.return_value = _mock_groq_response("not json")

    recs, source = generate_recommendations(SAMPLE_PREFERENCES, ENABLED_CONFIG)

    assert source == "rules"
    assert recs[0].title == "Secure Your Wedding Venue"


@patch("wedding_planner.llm.groq_client.Groq")
def test_ai_recommendations_schema_mismatch_is_empty(mock_groq_cls):
    bad = json.dumps({"recommendations": [{"priority": "urgent", "title": "x"}]})
    mock_groq_cls.return_value.chat.completions.create.return_value = _mock_groq_response(bad)
    assert ai_recommendations(SAMPLE_PREFERENCES, ENABLED_CONFIG) == []


@patch("wedding_planner.llm.groq_client.Groq")
def test_ai_recommendations_empty_list_falls_back(mock_groq_cls):
    mock_groq_cls.return_value.chat.completions.create.return_value = _mock_groq_response(
        json.dumps({"recommendations": []})
    )
    _, source = generate_recommendations(SAMPLE_PREFERENCES, ENABLED_CONFIG)
    assert source == "rules"


@patch("wedding_planner.llm.groq_client.Groq")
def test_ai_recommendations_api_error_falls_back(mock_groq_cls):
    mock_groq_cls.return_value.chat.completions.create.side_effect = Exception("API timeout")
    _, source = generate_recommendations(SAMPLE_PREFERENCES, ENABLED_CONFIG)
    assert source == "rules"


@patch("wedding_planner.llm.groq_client.Groq")
def test_ai_recommendations_disabled_skips_api(mock_groq_cls):
    _, source = generate_recommendations(SAMPLE_PREFERENCES, DISABLED_CONFIG)
    assert source == "rules"
    mock_groq_cls.assert_not_called()


def test_config_available_needs_key_and_flag():
    assert ENABLED_CONFIG.available
    assert not DISABLED_CONFIG.available
    assert not LLMConfig(api_key="", enabled=True).available
