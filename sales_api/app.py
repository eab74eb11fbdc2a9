"""FastAPI application setup module."""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sales_api.settings import settings
from sales_api.database.store import TransactionStore
from sales_api.exceptions.api_exception import SalesAPIException
from sales_api.endpoints.analytics import router as analytics_router
from sales_api.endpoints.seed import router as seed_router

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the schema on startup and release the store on shutdown."""
    store: TransactionStore = app.state.store
    await store.ensure_schema()
    logger.info("Transaction store ready")
    yield
    await store.close()


def create_app(store: Optional[TransactionStore] = None) -> FastAPI:
    """Build the application around an explicit transaction store."""
    app = FastAPI(
        title="Product Sales API",
        description="Monthly sales analytics over product transaction data",
        version="1.0.0",
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.store = store or TransactionStore(settings.DATABASE_URL, echo=settings.DEBUG)

    # CORS middleware for frontend integration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(SalesAPIException)
    async def sales_api_exception_handler(request: Request, exc: SalesAPIException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail, "type": exc.error_type},
        )

    # Include routers
    app.include_router(seed_router)
    app.include_router(analytics_router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()
