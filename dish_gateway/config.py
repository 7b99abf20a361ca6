from __future__ import annotations

import os
from dataclasses import dataclass

from fastapi import Request

from .llm.config import DEFAULT_LLM_CONFIG, LLMConfig

_TRUTHY = {"1", "true", "yes", "on"}


def _split_csv(value: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in value.split(",") if part.strip())


@dataclass(frozen=True)
class GatewayConfig:
    api_key: str = os.getenv("GATEWAY_API_KEY", "")
    cors_origins: tuple[str, ...] = _split_csv(os.getenv("CORS_ORIGINS", "*"))
    prompt_timestamp: bool = os.getenv("PROMPT_APPEND_TIMESTAMP", "false").lower() in _TRUTHY
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3001"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    llm: LLMConfig = DEFAULT_LLM_CONFIG


DEFAULT_GATEWAY_CONFIG = GatewayConfig()


def get_gateway_config(request: Request) -> GatewayConfig:
    """Return the config the running app was created with."""
    return request.app.state.config
