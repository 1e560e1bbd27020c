from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from answers import router as answers_router
from core.config import Settings
from core.cors import CORSMiddleware
from core.errors import register_error_handlers
from core.logging import configure_logging
from core.store import QuestionStore, Store
from questions import router as questions_router


def create_app(settings: Settings | None = None, store: QuestionStore | None = None) -> FastAPI:
    """
    Build the API. `settings` defaults to the environment; pass `store` to
    skip opening a Postgres pool (tests, local runs with `InMemoryStore`).
    """
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Open the pool once per process unless a store was handed in.
        if store is not None:
            app.state.store = store
            yield
            return

        app.state.store = await Store.connect(settings)
        try:
            yield
        finally:
            await app.state.store.close()

    app = FastAPI(lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["content-type"],
    )

    register_error_handlers(app)

    app.include_router(questions_router.router, tags=["questions"])
    app.include_router(answers_router.router, tags=["answers"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()
