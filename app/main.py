from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from app.config import get_settings
from app.database import engine, Base
from app.api import products, users, orders, health
from app.api.error_handlers import register_error_handlers, unexpected_error_response

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    logger.info("Starting up application...")

    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created successfully")

    yield

    logger.info("Shutting down application...")


app = FastAPI(
    title=settings.APP_NAME,
    description="""
    Demo REST API for API gateway integration, with CRUD operations over
    products, users and orders.

    ## Features

    ### Filtering
    List endpoints accept optional filters combined with AND. String filters
    are case-insensitive; name searches match substrings. Listings are not
    paginated and report their size in `X-Total-Count`.

    ### Gateway headers
    `X-Request-ID` is echoed on every response (`N/A` when absent).
    List endpoints echo `X-API-Version` and log `X-Client-ID`.

    ### Updates
    `PUT` replaces every field of the stored record. Omitted optional
    fields are cleared; ids and creation timestamps never change.
    """,
    version=settings.APP_VERSION,
    contact={
        "name": "API Support",
        "email": "support@example.com"
    },
    license_info={
        "name": "MIT",
        "url": "https://opensource.org/licenses/MIT"
    },
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID", "X-Total-Count", "X-API-Version", "Location"],
)


@app.middleware("http")
async def echo_request_id(request: Request, call_next):
    """Echo the gateway's X-Request-ID on every response."""
    try:
        response = await call_next(request)
    except Exception as e:
        response = unexpected_error_response(request, e)
    response.headers["X-Request-ID"] = request.headers.get("X-Request-ID", "N/A")
    return response


register_error_handlers(app)

# Include API routers
app.include_router(health.router, prefix="/api/v1")
app.include_router(products.router, prefix="/api/v1")
app.include_router(users.router, prefix="/api/v1")
app.include_router(orders.router, prefix="/api/v1")


@app.get("/", tags=["Root"])
def root():
    """Root endpoint with API information."""
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "redoc": "/redoc",
        "health": "/api/v1/health"
    }
