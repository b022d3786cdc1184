"""
Vendor search.

Responsibilities:
- Gather candidate vendors from several synthetic sources.
- Filter them by location, budget overlap and guest-count suitability.
- Deduplicate by (name, location) and rank them, via the LLM when available.
- Cache finished searches for a fixed time-to-live.
"""
