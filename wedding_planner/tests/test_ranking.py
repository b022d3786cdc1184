from __future__ import annotations

from unittest.mock import MagicMock, patch

from wedding_planner.llm.config import LLMConfig
from wedding_planner.vendors.models import Vendor, VendorSearchRequest
from wedding_planner.vendors.ranking import (
    LLMRanker,
    ScoreRanker,
    deduplicate,
    parse_ranked_ids,
    score,
)

ENABLED_CONFIG = LLMConfig(api_key="test-key", enabled=True)
DISABLED_CONFIG = LLMConfig(api_key="test-key", enabled=False)
REQUEST = VendorSearchRequest(category="photographer", location="London")


def _vendor(vid: str, name: str = "Golden Hour Studios", location: str = "London",
            rating: float = 4.5, review_count: int = 100) -> Vendor:
    return Vendor(
        id=vid, name=name, category="photographer", location=location,
        rating=rating, review_count=review_count,
    )


def _mock_groq_response(content: str) -> MagicMock:
    message = MagicMock()
    message.content = content
    choice = MagicMock()
    choice.message = message
    response = MagicMock()
    response.choices = [choice]
    return response


# ── Deduplication ────────────────────────────────────────────────────────


def test_dedup_keeps_higher_rating_case_insensitively():
    low = _vendor("low", name="Candid Moments", location="London", rating=4.2)
    high = _vendor("high", name="CANDID MOMENTS", location="london", rating=4.7)
    result = deduplicate([low, high])
    assert [v.id for v in result] == ["high"]


def test_dedup_first_seen_wins_ties():
    first = _vendor("first", rating=4.5)
    second = _vendor("second", rating=4.5)
    assert [v.id for v in deduplicate([first, second])] == ["first"]


def test_dedup_keeps_position_of_first_occurrence():
    a = _vendor("a", name="A", rating=4.0)
    b = _vendor("b", name="B", rating=4.0)
    a_better = _vendor("a2", name="A", rating=4.9)
    assert [v.id for v in deduplicate([a, b, a_better])] == ["a2", "b"]


def test_dedup_same_name_different_location_kept():
    vendors = [_vendor("x", location="London"), _vendor("y", location="Surrey")]
    assert len(deduplicate(vendors)) == 2


def test_dedup_is_idempotent():
    vendors = [
        _vendor("1", name="A", rating=4.1),
        _vendor("2", name="a", rating=4.8),
        _vendor("3", name="B"),
        _vendor("4", name="C", location="Kent"),
        _vendor("5", name="c", location="KENT", rating=3.0),
    ]
    once = deduplicate(vendors)
    assert deduplicate(once) == once


# ── Score ranking ────────────────────────────────────────────────────────


def test_score_increases_with_rating():
    assert score(_vendor("a", rating=4.8)) > score(_vendor("b", rating=4.2))


def test_score_increases_with_review_count():
    assert score(_vendor("a", review_count=500)) > score(_vendor("b", review_count=50))


def test_score_ranker_orders_descending():
    vendors = [
        _vendor("few", rating=4.9, review_count=2),
        _vendor("many", rating=4.6, review_count=800),
        _vendor("mid", rating=4.5, review_count=120),
    ]
    ranked, strategy = ScoreRanker().rank(vendors, REQUEST)
    assert [v.id for v in ranked] == ["many", "mid", "few"]
    assert strategy == "score"


def test_score_ranker_is_stable_for_equal_scores():
    vendors = [_vendor("a"), _vendor("b"), _vendor("c")]
    ranked, _ = ScoreRanker().rank(vendors, REQUEST)
    assert [v.id for v in ranked] == ["a", "b", "c"]


# ── LLM ranking ──────────────────────────────────────────────────────────


def test_parse_ranked_ids_trims_and_skips_blanks():
    assert parse_ranked_ids(" v2 , v1,, ") == ["v2", "v1"]


@patch("wedding_planner.llm.groq_client.Groq")
def test_llm_ranker_reorders_and_appends_missing(mock_groq_cls):
    mock_groq_cls.return_value.chat.completions.create.return_value = _mock_groq_response("v3, v1")
    vendors = [_vendor("v1", name="A"), _vendor("v2", name="B"), _vendor("v3", name="C")]

    ranked, strategy = LLMRanker(ENABLED_CONFIG).rank(vendors, REQUEST)

    assert [v.id for v in ranked] == ["v3", "v1", "v2"]
    assert strategy == "llm"
    kwargs = mock_groq_cls.return_value.chat.completions.create.call_args.kwargs
    assert kwargs["max_tokens"] == 200
    assert "London" in kwargs["messages"][0]["content"]


@patch("wedding_planner.llm.groq_client.Groq")
def test_llm_ranker_ignores_unknown_ids(mock_groq_cls):
    mock_groq_cls.return_value.chat.completions.create.return_value = _mock_groq_response("zzz, v2")
    vendors = [_vendor("v1", name="A"), _vendor("v2", name="B")]

    ranked, strategy = LLMRanker(ENABLED_CONFIG).rank(vendors, REQUEST)

    assert [v.id for v in ranked] == ["v2", "v1"]
    assert strategy == "llm"


@patch("wedding_planner.llm.groq_client.Groq")
def test_llm_ranker_falls_back_on_api_error(mock_groq_cls):
    mock_groq_cls.return_value.chat.completions.create.side_effect = Exception("API timeout")
    vendors = [_vendor("low", name="A", rating=3.5), _vendor("high", name="B", rating=4.9)]

    ranked, strategy = LLMRanker(ENABLED_CONFIG).rank(vendors, REQUEST)

    assert [v.id for v in ranked] == ["high", "low"]
    assert strategy == "score"


@patch("wedding_planner.llm.groq_client.Groq")
def test_llm_ranker_falls_back_when_reply_names_no_vendor(mock_groq_cls):
    mock_groq_cls.return_value.chat.completions.create.return_value = _mock_groq_response(
        "I cannot rank these vendors."
    )
    vendors = [_vendor("low", name="A", rating=3.5), _vendor("high", name="B", rating=4.9)]

    ranked, strategy = LLMRanker(ENABLED_CONFIG).rank(vendors, REQUEST)

    assert [v.id for v in ranked] == ["high", "low"]
    assert strategy == "score"


@patch("wedding_planner.llm.groq_client.Groq")
def test_llm_ranker_falls_back_on_empty_reply(mock_groq_cls):
    mock_groq_cls.return_value.chat.completions.create.return_value = _mock_groq_response("")
    ranked, strategy = LLMRanker(ENABLED_CONFIG).rank([_vendor("v1")], REQUEST)
    assert [v.id for v in ranked] == ["v1"]
    assert strategy == "score"


@patch("wedding_planner.llm.groq_client.Groq")
def test_llm_ranker_disabled_skips_api(mock_groq_cls):
    ranked, strategy = LLMRanker(DISABLED_CONFIG).rank([_vendor("v1")], REQUEST)
    assert strategy == "score"
    mock_groq_cls.assert_not_called()


@patch("wedding_planner.llm.groq_client.Groq")
def test_llm_ranker_no_api_key_skips_api(mock_groq_cls):
    ranked, strategy = LLMRanker(LLMConfig(api_key="", enabled=True)).rank([_vendor("v1")], REQUEST)
    assert strategy == "score"
    mock_groq_cls.assert_not_called()
