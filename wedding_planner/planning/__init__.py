"""
Couple-owned planning records.

Responsibilities:
- Validate questionnaire, budget, timeline and checklist payloads.
- Replace-on-save persistence of each record set, scoped to one user.
- Summarise everything on the dashboard with derived progress totals.
"""
