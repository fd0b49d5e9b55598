import os

import uvicorn
from dotenv import load_dotenv

load_dotenv()

APP = "backend_fastapi.main:app"


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def run() -> None:
    """Serve the task manager API with the backend chosen by ORM/DATABASE_URL."""
    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", "8000"))
    reload = _as_bool(os.getenv("RELOAD", "true"))
    log_level = os.getenv("LOG_LEVEL", "info")
    orm = os.getenv("ORM", "peewee").lower()
    database_url = os.getenv("DATABASE_URL", "sqlite:///tasks.db")

    print(
        f"Task manager API on http://{host}:{port}/api "
        f"(ORM: {orm}, database: {database_url.split('@')[-1]}, reload: {reload})"
    )

    uvicorn.run(APP, host=host, port=port, reload=reload, log_level=log_level)


if __name__ == "__main__":
    run()
