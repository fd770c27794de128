from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from cropcare.config import get_settings
from cropcare.handlers import analysis_handler, page_handler
from cropcare.services.analysis_client import analysis_client

settings = get_settings()
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    yield
    await analysis_client.close()


app = FastAPI(title=settings.app_title, lifespan=lifespan)

app.include_router(page_handler.router)
app.include_router(analysis_handler.router)


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}
