import logging
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import API_TITLE, API_DESCRIPTION, VERSION
from app.config.logging import setup_logging
from app.controllers.movie_controller import router as movie_router
from app.db.database import engine, Base
from app.domain.dto import HealthResponse
from app.exceptions.repository import RepositoryException

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=VERSION
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# include controllers
app.include_router(movie_router)


async def init_db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@app.on_event("startup")
async def startup_event():
    try:
        await init_db()
        logger.info("Database initialized")
    except Exception as e:
        logger.error(f"Error initializing database: {str(e)}")
        raise


@app.on_event("shutdown")
async def shutdown_event():
    await engine.dispose()
    logger.info("Database engine disposed")


@app.exception_handler(RepositoryException)
async def repository_exception_handler(request: Request, exc: RepositoryException):
    logger.error(f"Repository failure on {request.method} {request.url.path}: {str(exc)}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"}
    )


@app.get("/health", response_model=HealthResponse)
def health_check():
    return {"status": "healthy"}
