from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from journal_prompts.core.config import CORS_ORIGINS
from journal_prompts.core.dependency import build_prompt_engine
from journal_prompts.core.logging_config import configure_logging
from journal_prompts.prompts import routes as prompts_router
from journal_prompts.prompts.service import PromptEngine


def create_app(prompt_engine: PromptEngine | None = None) -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Journal Prompt API",
        version="1.0.0",
        description="Visualization, baseline and contextual journaling prompts with offline fallbacks.",
    )

    # CORS config
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routers
    app.include_router(prompts_router.router)

    # One engine per process, shared through app.state
    app.state.prompt_engine = prompt_engine or build_prompt_engine()

    @app.get("/health", tags=["System"])
    def health_route():
        return {"status": "ok"}

    return app


app = create_app()
