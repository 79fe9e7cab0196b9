from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from student_manager.core.config import settings
from student_manager.core.database import init_db
from student_manager.core.handlers import register_exception_handlers
from student_manager.core.logging import setup_logging
from student_manager.api.router import api_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger = setup_logging()
    logger.info(f"Starting {settings.PROJECT_NAME} {settings.APP_VERSION}")
    init_db()
    yield
    logger.info("Shutting down")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include API router
app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/")
def root():
    """
    Health check endpoint
    """
    return {
        "message": "Welcome to Student Manager API",
        "docs": "/docs",
        "version": settings.APP_VERSION
    }


if __name__ == "__main__":
    uvicorn.run(
        "student_manager.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG
    )
