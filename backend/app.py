from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from fastapi import FastAPI

from adventure_time.store import AdventureStore
from backend.routes import router
from backend import session

load_dotenv(Path(__file__).parent.parent / ".env")


def create_app(
    config: dict[str, Any] | None = None,
    store: AdventureStore | None = None,
) -> FastAPI:
    session.init_session(config, store)

    app = FastAPI(title="Adventure Time")
    app.include_router(router, prefix="/api")
    return app


# Default app instance for uvicorn (reads settings from the environment)
app = create_app()
