import logging

from fastapi import FastAPI

from .config import API_PREFIX, LOG_LEVEL
from .middleware.logging import LoggingMiddleware
from .routes.api import router


def create_app() -> FastAPI:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title="Study Scheduler", version="1.0.0")
    app.add_middleware(LoggingMiddleware)
    app.include_router(router, prefix=API_PREFIX)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    # uvicorn study_scheduler.main:app --host 0.0.0.0 --port 8000
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    run()
