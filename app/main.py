# app/main.py
from contextlib import asynccontextmanager
import logging

from fastapi.middleware.cors import CORSMiddleware
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlmodel import Session

from app.core.config import get_settings
from app.core.exceptions import StoreError
from app.database import create_db_and_tables, engine

# Import models so SQLModel metadata is populated before create_all()
from app.models import user as _user_models  # noqa: F401
from app.models import gift_item as _gift_item_models  # noqa: F401
from app.models import reservation as _reservation_models  # noqa: F401

# Routers
from app.routers.session import router as session_router
from app.routers.users import router as users_router
from app.routers.gifts import router as gifts_router
from app.routers.host import router as host_router
from app.services.seed_service import seed_gift_items
from app.stores import build_store

settings = get_settings()

logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
logger = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
      - Verify DB connectivity and create tables (sql backend).
      - Seed the default gift catalog if it is empty.
    """
    logger.info("🔄 Startup: store backend = %s", settings.STORE_BACKEND)
    try:
        if settings.STORE_BACKEND == "sql":
            create_db_and_tables()
            logger.info("✅ Startup: DB connection OK, tables verified.")
        if settings.SEED_GIFT_ITEMS:
            with Session(engine) as session:
                seed_gift_items(build_store(session))
    except Exception as e:
        logger.error(f"❌ Startup: store initialization FAILED: {e}")
        raise
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    """Turn a failed store call into one message the guest can read."""
    logger.error("Store call failed on %s %s: %s", request.method, request.url.path, exc.__cause__)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": exc.message},
    )


# --- CORS configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Versioned API prefix, e.g. /api/v1
app.include_router(session_router, prefix=settings.API_V1_STR)
app.include_router(users_router, prefix=settings.API_V1_STR)
app.include_router(gifts_router, prefix=settings.API_V1_STR)
app.include_router(host_router, prefix=settings.API_V1_STR)


@app.get("/")
def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "gift-list-backend"}
