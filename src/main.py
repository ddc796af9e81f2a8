"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from src.api import pantry, recipes
from src.config import get_settings
from src.database import SessionLocal, init_db
from src.services.sample_data import seed_sample_data

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    if settings.create_tables_on_startup:
        init_db()
    if settings.seed_sample_data:
        db = SessionLocal()
        try:
            seed_sample_data(db)
        finally:
            db.close()
    logger.info(f"API started in {settings.environment} environment")
    yield
    logger.info("API shutting down")


app = FastAPI(
    title="Recipe Pantry API",
    description="Recipes and a pantry that turns missing ingredients into a shopping list",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials="*" not in settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Report storage failures not handled by an endpoint as 500."""
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database error"},
    )


# Register routers
app.include_router(recipes.router)
app.include_router(pantry.router)
app.include_router(pantry.shopping_list_router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
