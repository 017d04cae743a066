import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.requests import Request

from .config import settings
from .db import init_models
from .logging_setup import setup_logging
from .routers import health, ingest, quick_add, tasks

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level)
    await init_models()
    logger.info("Task service started (env=%s)", settings.app_env)
    yield


app = FastAPI(title="Quick-Add Task Service", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info("%s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms)
    return response


app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
app.include_router(ingest.router, prefix="/ingest", tags=["ingest"])
app.include_router(quick_add.router, tags=["quick-add"])


@app.get("/")
def root():
    return {"ok": True, "service": "task", "version": "0.1.0"}
