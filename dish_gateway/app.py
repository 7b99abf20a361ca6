from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from .auth.dependencies import require_api_key
from .config import DEFAULT_GATEWAY_CONFIG, GatewayConfig, get_gateway_config
from .dishes.formatting import format_recipe, sanitize_dish_name, strip_line_breaks
from .dishes.models import (
    DishPreferences,
    DishRecommendationResponse,
    LegacyDishRequest,
    RecipeRequest,
    RecipeResponse,
)
from .dishes.prompts import (
    DISH_MAX_TOKENS,
    DISH_SYSTEM_PROMPT,
    RECIPE_SYSTEM_PROMPT,
    build_dish_prompt,
    build_legacy_prompt,
    build_recipe_prompt,
)
from .errors import EmptyCompletionError, GatewayError
from .llm.client import CompletionClient, get_completion_client

logger = logging.getLogger(__name__)

router = APIRouter()


# ── Public endpoints ─────────────────────────────────────────────────────


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


# ── Recommendation endpoints ─────────────────────────────────────────────


@router.post(
    "/recommend-dish",
    response_model=DishRecommendationResponse,
    dependencies=[Depends(require_api_key)],
)
async def recommend_dish(
    body: DishPreferences,
    config: GatewayConfig = Depends(get_gateway_config),
    client: CompletionClient = Depends(get_completion_client),
) -> DishRecommendationResponse:
    timestamp = datetime.now(timezone.utc) if config.prompt_timestamp else None
    prompt = build_dish_prompt(body, timestamp=timestamp)
    logger.info("Recommending a %s dish for %s", body.cuisine, body.meal_type)

    reply = await client.complete(prompt, DISH_SYSTEM_PROMPT, max_tokens=DISH_MAX_TOKENS)
    dish = sanitize_dish_name(reply)
    if not dish:
        raise EmptyCompletionError()
    return DishRecommendationResponse(dish_recommendation=dish)


@router.post("/recipe", response_model=RecipeResponse, dependencies=[Depends(require_api_key)])
async def recipe(
    body: RecipeRequest,
    client: CompletionClient = Depends(get_completion_client),
) -> RecipeResponse:
    logger.info("Writing recipe for %s", body.dish_name)
    reply = await client.complete(build_recipe_prompt(body), RECIPE_SYSTEM_PROMPT)
    return RecipeResponse(recipe=format_recipe(reply))


@router.post("/", response_model=None, dependencies=[Depends(require_api_key)])
async def recommend_dish_legacy(
    body: LegacyDishRequest,
    client: CompletionClient = Depends(get_completion_client),
):
    # Legacy contract: bare JSON string, plain-text 500 on failure.
    try:
        reply = await client.complete(
            build_legacy_prompt(body), DISH_SYSTEM_PROMPT, max_tokens=DISH_MAX_TOKENS
        )
    except GatewayError as exc:
        logger.error("Legacy recommendation failed: %s", exc)
        return PlainTextResponse("Internal Server Error", status_code=500)
    return strip_line_breaks(reply)


# ── App factory ──────────────────────────────────────────────────────────


async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=exc.http_status, content=exc.to_dict())


@asynccontextmanager
async def lifespan(app: FastAPI):
    config: GatewayConfig = app.state.config
    logger.info("Gateway starting with %s model %s", config.llm.provider, config.llm.model)
    try:
        yield
    finally:
        await app.state.completion_client.aclose()


def create_app(config: GatewayConfig = DEFAULT_GATEWAY_CONFIG) -> FastAPI:
    app = FastAPI(title="Dish Recommendation Gateway", version="1.0.0", lifespan=lifespan)
    app.state.config = config
    app.state.completion_client = CompletionClient(config.llm)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(GatewayError, gateway_error_handler)
    app.include_router(router)
    return app


app = create_app()
