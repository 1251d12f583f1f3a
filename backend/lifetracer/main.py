"""
Life Tracer - Main FastAPI Application

Serves an owner's categories and life events, and the layout of the two
timeline views built from them.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from lifetracer import __version__
from lifetracer.api.v1.router import api_router
from lifetracer.config import get_settings
from lifetracer.db.session import init_db
from lifetracer.errors import InvalidEventDate, NotFoundError, UnknownCategoryError

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("%s %s started (%s)", settings.project_name, __version__, settings.environment)
    yield


app = FastAPI(
    title=settings.project_name,
    description="""
    Life Tracer: record life events ("souvenirs") by category and see them
    on two timelines.

    ## Views

    - **Linear**: one column per category, zoomable in pixels per year
    - **Global**: all events folded into 25-year bands, alternating direction
    """,
    version=__version__,
    debug=settings.debug,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.backend_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": f"{exc.kind} not found"})


@app.exception_handler(UnknownCategoryError)
async def unknown_category_handler(request: Request, exc: UnknownCategoryError):
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(InvalidEventDate)
async def invalid_date_handler(request: Request, exc: InvalidEventDate):
    logger.error("Invalid event date reached the layout engine: %s", exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


# Include API router
app.include_router(api_router, prefix=settings.api_v1_prefix)


@app.get("/")
async def root():
    """Root endpoint - system status."""
    return {
        "system": settings.project_name,
        "status": "operational",
        "version": __version__,
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


def run():
    """Start the development server."""
    import uvicorn

    uvicorn.run("lifetracer.main:app", host="0.0.0.0", port=8000, reload=settings.debug)


if __name__ == "__main__":
    run()
