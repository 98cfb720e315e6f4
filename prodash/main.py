from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from prodash.db import dispose_engine
from prodash.db_init import init_db
from prodash.routes import admin, auth, budget, chat, habits, jobs, overview, projects, tasks
from prodash.settings import get_settings


def create_app() -> FastAPI:
    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    app = FastAPI(title="ProDash API", version="0.1.0")

    app.include_router(auth.router)
    app.include_router(overview.router)
    app.include_router(tasks.router)
    app.include_router(jobs.router)
    app.include_router(projects.router)
    app.include_router(habits.router)
    app.include_router(budget.router)
    app.include_router(chat.router)
    app.include_router(admin.router)

    @app.on_event("startup")
    async def _startup():
        await init_db()

    @app.on_event("shutdown")
    async def _shutdown():
        await dispose_engine()

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(request: Request, exc: Exception):
        logging.getLogger("prodash").exception("Unhandled exception: %s", exc)
        return JSONResponse(status_code=500, content={"detail": "Internal error"})

    @app.get("/health")
    async def health():
        return {"ok": True}

    return app


app = create_app()
