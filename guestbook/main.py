import logging

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .config import Settings, settings
from .routes import router
from .storage import MessageStore

logger = logging.getLogger("uvicorn")


def create_app(store: Optional[MessageStore] = None, config: Settings = settings) -> FastAPI:
    """
    Builds the guestbook application around a single message store.

    Args:
        store (Optional[MessageStore]): Store to serve. A fresh one is created when omitted.
        config (Settings): Runtime settings.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Lifespan context manager to handle startup and shutdown events.
        """
        logger.info(f"[Guestbook] Guestbook listening on port {config.port}")
        yield
        logger.info(f"[Guestbook] Shutting down with {len(app.state.store)} messages in memory")

    logger.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))

    app = FastAPI(title="Guestbook", lifespan=lifespan)
    app.state.store = store if store is not None else MessageStore(max_messages=config.max_messages)
    app.include_router(router)

    return app


app = create_app()


def run():
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
