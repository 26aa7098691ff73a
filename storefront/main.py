"""
Storefront Application

Catalog, cart and retailer inventory state behind a JSON API for the
storefront screens.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

from .core.config import get_settings
from .routes import catalog_router, cart_router, retailer_router
from .state import StorefrontState, build_state, create_source

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(state: Optional[StorefrontState] = None) -> FastAPI:
    """Create the API, using the given state or one built from settings"""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events"""
        logger.info("Storefront starting up...")
        app.state.storefront = state or build_state(create_source(settings))
        logger.info(f"Catalog backend: {settings.catalog_backend}")

        yield

        logger.info("Storefront shutting down...")
        await app.state.storefront.close()

    app = FastAPI(
        title=settings.app_name,
        description="Catalog, cart and retailer inventory for the storefront",
        version="1.0.0",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # In production, restrict this
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(catalog_router)
    app.include_router(cart_router)
    app.include_router(retailer_router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "service": "storefront",
            "catalog_backend": settings.catalog_backend,
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "storefront.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
