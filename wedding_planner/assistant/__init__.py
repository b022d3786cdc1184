"""
Conversational wedding-planning assistant backed by a streaming Groq chat
completion, relayed to the browser as server-sent events.
"""
