from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv
import os

load_dotenv()

from infrastructure.metrics.metrics import metrics_endpoint
from infrastructure.db.database import init_models
from infrastructure.logging.structlog_logs import logger
from app.errors import register_exception_handlers
from app.routers import analytics, decisions, goals, projects


@asynccontextmanager
async def lifespan(app: FastAPI):
    if os.getenv("DB_AUTO_CREATE", "true").lower() == "true":
        await init_models()
        logger.info("db_tables_ready")
    yield


app = FastAPI(title="decision-tracker", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[os.getenv("FRONTEND_URL", "http://localhost:3000")],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/metrics")
async def metrics():
    return metrics_endpoint()


@app.get("/health")
async def health():
    return {"status": "ok", "message": "decision-tracker is running"}


app.include_router(decisions.router)
app.include_router(goals.router)
app.include_router(projects.router)
app.include_router(analytics.router)
