"""
LLM integration layer.

Responsibilities:
- Manage Groq API configuration and credentials.
- Provide one place to build a Groq client for the ranking, recommendation
  and assistant features.
- Callers own their fallbacks: every feature degrades to a deterministic
  answer (or a clean HTTP error) when the LLM is unavailable.
"""
