"""
Dish recommendation gateway.

Accepts meal preferences over HTTP, turns them into a prompt for a
chat-completion provider and returns the cleaned-up answer.
"""
