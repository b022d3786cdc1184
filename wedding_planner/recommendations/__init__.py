"""
Wedding recommendation engine.

Responsibilities:
- Normalize a stored questionnaire into typed WeddingPreferences.
- Ask the LLM for tailored planning recommendations.
- Fall back to a small deterministic rule table when the LLM is unavailable.
- Produce per-category budget allocations and a style moodboard.
"""
