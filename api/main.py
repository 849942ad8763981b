from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core import settings
from core.db import Database
from core.ids import IdGenerator, UUIDGenerator
from core.logging_setup import configure_logging
from posts import router as posts_router


def create_app(
    *,
    database: Database | None = None,
    id_generator: IdGenerator | None = None,
) -> FastAPI:
    """
    Build the API.

    When `database` is given (tests, embedding) the app uses it as-is and
    leaves closing it to the caller. Otherwise a pool is opened from
    DATABASE_URL on startup and closed on shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if database is not None:
            yield
            return

        # One pool per process, shared by every request.
        app.state.db = await Database.connect()
        try:
            yield
        finally:
            await app.state.db.close()
            app.state.db = None

    app = FastAPI(lifespan=lifespan)
    app.state.db = database
    app.state.id_generator = id_generator or UUIDGenerator()

    # Allow local frontend dev server to call this API from the browser.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(posts_router.router, tags=["posts"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/")
    def root() -> dict:
        return {"message": "microblog api"}

    return app


def run() -> None:
    import uvicorn

    configure_logging()
    uvicorn.run(
        create_app(),
        host=settings.api_host(),
        port=settings.api_port(),
        log_level=settings.log_level().lower(),
    )


if __name__ == "__main__":
    run()
