from __future__ import annotations

import logging
import secrets

from fastapi import Depends, Header, HTTPException

from ..config import GatewayConfig, get_gateway_config

logger = logging.getLogger(__name__)


def require_api_key(
    x_api_key: str | None = Header(default=None),
    config: GatewayConfig = Depends(get_gateway_config),
) -> None:
    """Raise 401 if the ``x-api-key`` header is missing, 403 if it is wrong.

    No check is made when the gateway has no shared secret configured.
    """
    if not config.api_key:
        return
    if not x_api_key:
        raise HTTPException(status_code=401, detail="Missing API key")
    if not secrets.compare_digest(x_api_key.encode(), config.api_key.encode()):
        logger.info("Rejected request with an invalid API key")
        raise HTTPException(status_code=403, detail="Invalid API key")
