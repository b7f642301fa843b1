"""FastAPI application entry point."""

from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from completion_api.config import Settings, settings as default_settings
from completion_api.llm.completer import Completer, CompletionError, LLMCompleter
from completion_api.llm.openai_client import OpenAIChatClient
from completion_api.models.completion import CompletionRequest, CompletionResponse

logger = logging.getLogger(__name__)


def build_completer(config: Settings) -> LLMCompleter:
    """Create the production completer from explicit settings."""
    client = OpenAIChatClient(
        api_key=config.openrouter_api_key,
        base_url=config.openrouter_base_url,
        model=config.model,
        timeout=config.request_timeout,
    )
    return LLMCompleter(client)


def get_completer(request: Request) -> Completer:
    state = request.app.state
    if state.completer is None:
        try:
            state.completer = build_completer(state.settings)
        except ValueError as exc:
            logger.error("Completer unavailable: %s", exc)
            raise HTTPException(
                status_code=503, detail="Completion service is not configured."
            ) from exc
    return state.completer


def create_app(
    settings: Settings | None = None,
    completer: Completer | None = None,
) -> FastAPI:
    config = settings or default_settings

    app = FastAPI(
        title="Completion API",
        description="Forwards questions to a hosted LLM and returns its answer.",
        version="0.1.0",
    )
    app.state.settings = config
    app.state.completer = completer

    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=".*",
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health() -> dict[str, str]:
        """Simple readiness probe."""
        return {"status": "ok"}

    @app.post("/completion", response_model=CompletionResponse)
    def completion(
        payload: CompletionRequest,
        completer: Completer = Depends(get_completer),
    ) -> CompletionResponse:
        """Answer a single question with one upstream completion."""
        try:
            answer = completer.complete(payload.question)
        except CompletionError as exc:
            raise HTTPException(status_code=500, detail="Completion request failed.") from exc
        logger.info("Answered question (%d chars) with %d chars.", len(payload.question), len(answer))
        return CompletionResponse(answer=answer)

    # Registered before the static mounts; "/" would otherwise shadow them.
    @app.get("/name", response_class=PlainTextResponse)
    def greeter_default() -> str:
        return "Hello, world!"

    @app.get("/name/{name}", response_class=PlainTextResponse)
    def greeter_with_name(name: str) -> str:
        return f"Hello, {name}!"

    static_dir = str(config.static_dir_path)
    app.mount("/static", StaticFiles(directory=static_dir), name="static")
    app.mount("/", StaticFiles(directory=static_dir, html=True), name="site")

    return app


app = create_app()
