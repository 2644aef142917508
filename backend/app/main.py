from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from app.core.config import get_settings
from app.core.database import engine
from app.core.envelope import register_exception_handlers
from app.routers import ai, models


settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Shutdown: release pooled database connections
    await engine.dispose()


app = FastAPI(
    title="Idest AI API",
    description="Context-grounded tutoring assistant and submission grading",
    version="1.0.0",
    lifespan=lifespan,
)
app.router.redirect_slashes = False

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        settings.frontend_url,
        "http://localhost:5173",
        "http://localhost",
        "http://127.0.0.1",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(ai.router, prefix="/ai", tags=["AI"])
app.include_router(models.router, prefix="/models", tags=["Models"])


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
