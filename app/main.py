from contextlib import asynccontextmanager

from fastapi import FastAPI
from prometheus_fastapi_instrumentator import Instrumentator
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from starlette.middleware.cors import CORSMiddleware

from app.api.v1 import api_router
from app.api.v1.exception_handlers import register_exception_handlers
from app.core.config import settings
from app.db.session import db_manager
from app.middlewares.logging_middleware import LoggingMiddleware
from app.middlewares.rate_limit import limiter
from app.tasks.notification_tasks import start_notifier, stop_notifier
from app.utils.logger import configure_logging, get_logger


# Configure logging to prevent duplicates
configure_logging()
logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.database.create_tables:
        db_manager.create_all()
    if settings.notifier.enabled:
        await start_notifier(app)
    else:
        logger.info("Reminder notifier disabled")
    yield
    await stop_notifier(app)


app = FastAPI(title="PetPals API", lifespan=lifespan)

allowed_origins = settings.allowed_hosts_list or [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:8000",
    "http://127.0.0.1:8000",
]
logger.info(f"CORS allowed origins: {allowed_origins}")
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
)

# 1) SlowAPI Rate limiting
app.add_middleware(SlowAPIMiddleware)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# 2) Logging middleware
app.add_middleware(LoggingMiddleware)

# Prometheus instrumentation
Instrumentator().instrument(app).expose(app)

register_exception_handlers(app)

app.include_router(api_router, prefix="/api/v1")


@app.get("/health")
async def health():
    notifier = getattr(app.state, "notifier", None)
    return {
        "status": "healthy",
        "message": "Backend is running",
        "notifier": {
            "running": notifier is not None,
            "pending": len(notifier) if notifier is not None else 0,
        },
    }


@app.get("/")
async def root():
    return {"message": "PetPals API"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
