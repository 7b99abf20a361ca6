"""
LLM integration layer.

Responsibilities:
- Manage completion provider configuration and credentials.
- Send a system instruction plus a user prompt to a chat-completion API.
- Pick a single candidate from the provider response.
- Convert provider and transport failures into gateway errors.
"""
