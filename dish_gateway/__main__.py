from __future__ import annotations

import logging

import uvicorn

from .config import DEFAULT_GATEWAY_CONFIG


def main() -> None:
    config = DEFAULT_GATEWAY_CONFIG
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "dish_gateway.app:app",
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
