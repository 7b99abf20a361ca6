from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

PROVIDERS = ("groq", "openai")

# Used when LLM_MODEL is unset
DEFAULT_MODELS = {
    "groq": "llama-3.3-70b-versatile",
    "openai": "gpt-4o-mini",
}


@dataclass(frozen=True)
class LLMConfig:
    provider: str = os.getenv("LLM_PROVIDER", "groq").lower()
    api_key: str = os.getenv("LLM_API_KEY", os.getenv("GROQ_API_KEY", ""))
    organization: str | None = os.getenv("ORGANIZATION_ID") or None
    model: str = os.getenv("LLM_MODEL", "")
    temperature: float = float(os.getenv("LLM_TEMPERATURE", "0.7"))
    timeout: float = float(os.getenv("LLM_TIMEOUT", "30.0"))
    max_tokens: int = int(os.getenv("LLM_MAX_TOKENS", "1024"))
    enabled: bool = True

    def __post_init__(self) -> None:
        if self.provider not in PROVIDERS:
            raise ValueError(
                f"Unknown LLM provider {self.provider!r}, expected one of {PROVIDERS}"
            )
        if not self.model:
            object.__setattr__(self, "model", DEFAULT_MODELS[self.provider])


DEFAULT_LLM_CONFIG = LLMConfig()
