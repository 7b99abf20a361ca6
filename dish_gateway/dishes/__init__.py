"""
Dish recommendation domain.

Responsibilities:
- Validate incoming meal preference and recipe requests.
- Build natural-language prompts from those requests.
- Clean model output before it is returned to the caller.
"""
